"""Command-line entry point of the application."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from cultivo.armazenamento import Armazenamento
from cultivo.casos_de_uso import InserirResultadoDeAnaliseDeSolo
from cultivo.daos import (
    DenunciasDao,
    PlantacoesDao,
    PlantasDao,
    TerrenosDao,
    UsuariosDao,
)
from cultivo.em_memoria import (
    DenunciasDaoEmMemoria,
    PlantacoesDaoEmMemoria,
    PlantasDaoEmMemoria,
    TerrenosDaoEmMemoria,
    UsuariosDaoEmMemoria,
)
from cultivo.enums import Cargo
from cultivo.gerentes import GerenteDeTerrenos
from cultivo.roteador import Aplicativo, Contexto
from cultivo.usuario import Usuario
from cultivo.util import agora

ROTA_ANALISE_DE_SOLO = "inserir-resultado-de-analise-de-solo"


def construa_aplicativo(
    armazenamento: Optional[Armazenamento] = None,
    entrada: Optional[TextIO] = None,
    saida: Optional[TextIO] = None,
) -> Aplicativo:
    """Build the application with its DAOs, the session user and its routes."""
    if armazenamento is None:
        armazenamento = Armazenamento()

    # Login is not supported; a fixed user is used for the session.
    usuario = Usuario(
        "John Doe",
        "john.doe@example.com",
        "placeholder",
        agora(),
        Cargo.USUARIO,
    )

    aplicativo = Aplicativo(entrada, saida)

    usuarios_dao = UsuariosDaoEmMemoria(armazenamento)
    usuarios_dao.coloque(usuario)

    contexto = aplicativo.contexto
    contexto.coloque(PlantasDaoEmMemoria(armazenamento), PlantasDao)
    contexto.coloque(usuarios_dao, UsuariosDao)
    contexto.coloque(DenunciasDaoEmMemoria(armazenamento), DenunciasDao)
    contexto.coloque(TerrenosDaoEmMemoria(armazenamento), TerrenosDao)
    contexto.coloque(PlantacoesDaoEmMemoria(armazenamento), PlantacoesDao)
    contexto.coloque(usuario)

    def inserir_resultado_de_analise_de_solo(contexto: Contexto) -> None:
        caso_de_uso = InserirResultadoDeAnaliseDeSolo(
            GerenteDeTerrenos(contexto), aplicativo.entrada, aplicativo.saida
        )
        caso_de_uso.executar(contexto.obtenha(Usuario).id)

    aplicativo.registrar_rota(
        ROTA_ANALISE_DE_SOLO,
        "Inserir Resultado de Análise de Solo",
        inserir_resultado_de_analise_de_solo,
    )
    return aplicativo


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive application; ``--seed`` fills the plant catalogue."""
    argumentos = list(sys.argv[1:] if argv is None else argv)
    armazenamento = Armazenamento()

    if argumentos and argumentos[0] == "--seed":
        sys.stdout.write("Populando os armazenamentos em memória...\n")
        armazenamento.popular()

    construa_aplicativo(armazenamento).rodar()
    return 0


if __name__ == "__main__":
    sys.exit(main())