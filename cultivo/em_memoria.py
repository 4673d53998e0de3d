"""Data-access objects backed by the in-memory ``Armazenamento``."""

from __future__ import annotations

import dataclasses
from typing import Optional

from cultivo.armazenamento import Armazenamento
from cultivo.daos import (
    DenunciasDao,
    PlantacoesDao,
    PlantasDao,
    TerrenosDao,
    UsuariosDao,
)
from cultivo.enums import EstadoDaDenuncia, MotivoDaDenuncia
from cultivo.moderacao import Denuncia, Denunciavel
from cultivo.terreno import Planta, Plantacao, Solo, Terreno
from cultivo.usuario import Usuario

_INTERVALO_DE_COMPATIBILIDADE_DE_PH = 0.5
_DIFERENCA_MAXIMA_DE_RETENCAO_DE_AGUA = 10
_CARGA_ELETRICA_SUPORTADA = 50


def planta_eh_compativel(planta: Planta, solo: Solo) -> bool:
    """Tell whether ``planta`` can be grown in ``solo``."""
    if abs(solo.acidez - planta.ph_ideal) > _INTERVALO_DE_COMPATIBILIDADE_DE_PH:
        return False

    minerais = solo.indice_de_minerais
    if (
        minerais < planta.indice_de_nitrogenio
        or minerais < planta.indice_de_fosforo
        or minerais < planta.indice_de_potassio
    ):
        return False

    # Clay retains water twice as well as silt.
    retencao_real = (solo.indice_de_argila * 2 + solo.indice_de_silte) // 3
    if (
        abs(retencao_real - planta.indice_de_retencao_de_agua)
        > _DIFERENCA_MAXIMA_DE_RETENCAO_DE_AGUA
    ):
        return False

    if not planta.aceita_vento and solo.carga_eletrica > _CARGA_ELETRICA_SUPORTADA:
        return False

    # Climate and sun exposure belong to the plot, not the soil, and are not
    # considered here.
    return True


class _DaoEmMemoria:
    def __init__(self, armazenamento: Optional[Armazenamento] = None) -> None:
        self.armazenamento = (
            armazenamento if armazenamento is not None else Armazenamento()
        )


def _indice_por_id(itens: list, id_procurado: str) -> Optional[int]:
    return next(
        (posicao for posicao, item in enumerate(itens) if item.id == id_procurado),
        None,
    )


def _substitua_ou_acrescente(itens: list, novo: object) -> None:
    posicao = _indice_por_id(itens, novo.id)  # type: ignore[attr-defined]
    if posicao is None:
        itens.append(novo)
    else:
        itens[posicao] = novo


class DenunciasDaoEmMemoria(_DaoEmMemoria, DenunciasDao):
    """Reports kept in memory."""

    def liste(self) -> list[Denuncia]:
        with self.armazenamento.trava_denuncias:
            return [denuncia.copia() for denuncia in self.armazenamento.denuncias]

    def crie(
        self,
        motivo: MotivoDaDenuncia,
        detalhes: Optional[str],
        relator: Usuario,
        denunciavel: Denunciavel,
    ) -> Denuncia:
        with self.armazenamento.trava_denuncias:
            denuncia = Denuncia(
                detalhes,
                motivo,
                EstadoDaDenuncia.PENDENTE,
                relator,
                denunciavel,
            )
            self.armazenamento.denuncias.append(denuncia)
            return denuncia

    def salve(self, denuncia: Denuncia) -> None:
        with self.armazenamento.trava_denuncias:
            _substitua_ou_acrescente(self.armazenamento.denuncias, denuncia.copia())

    def encontre(self, id_denuncia: str) -> Optional[Denuncia]:
        with self.armazenamento.trava_denuncias:
            denuncias = self.armazenamento.denuncias
            posicao = _indice_por_id(denuncias, id_denuncia)
            return None if posicao is None else denuncias[posicao].copia()


class PlantacoesDaoEmMemoria(_DaoEmMemoria, PlantacoesDao):
    """Plantings kept in memory."""

    def encontre(self, id_plantacao: str) -> Optional[Plantacao]:
        with self.armazenamento.trava_plantacoes:
            plantacoes = self.armazenamento.plantacoes
            posicao = _indice_por_id(plantacoes, id_plantacao)
            return None if posicao is None else dataclasses.replace(plantacoes[posicao])

    def crie(self, planta: Planta, terreno: Terreno) -> Plantacao:
        plantacao = Plantacao(planta, terreno)
        with self.armazenamento.trava_plantacoes:
            self.armazenamento.plantacoes.append(plantacao)
        return plantacao

    def salve(self, plantacao: Plantacao) -> None:
        with self.armazenamento.trava_plantacoes:
            _substitua_ou_acrescente(
                self.armazenamento.plantacoes, dataclasses.replace(plantacao)
            )


class PlantasDaoEmMemoria(_DaoEmMemoria, PlantasDao):
    """The plant catalogue kept in memory."""

    def encontre_plantas_correspondentes(self, solo: Solo) -> list[Planta]:
        with self.armazenamento.trava_plantas:
            return [
                dataclasses.replace(planta)
                for planta in self.armazenamento.plantas
                if planta_eh_compativel(planta, solo)
            ]

    def encontre(self, id_planta: str) -> Optional[Planta]:
        with self.armazenamento.trava_plantas:
            plantas = self.armazenamento.plantas
            posicao = _indice_por_id(plantas, id_planta)
            return None if posicao is None else plantas[posicao]

    def liste(self) -> list[Planta]:
        with self.armazenamento.trava_plantas:
            return [dataclasses.replace(planta) for planta in self.armazenamento.plantas]


class TerrenosDaoEmMemoria(_DaoEmMemoria, TerrenosDao):
    """Plots of land kept in memory."""

    def encontre(self, id_terreno: str) -> Optional[Terreno]:
        with self.armazenamento.trava_terrenos:
            terrenos = self.armazenamento.terrenos
            posicao = _indice_por_id(terrenos, id_terreno)
            return None if posicao is None else terrenos[posicao].copia()

    def crie_solo(
        self,
        acidez: float,
        indice_de_minerais: int,
        indice_de_salinidade: int,
        indice_de_argila: int,
        indice_de_silte: int,
        indice_de_areia: int,
        carga_eletrica: float,
    ) -> Solo:
        return Solo(
            acidez=acidez,
            indice_de_minerais=indice_de_minerais,
            indice_de_salinidade=indice_de_salinidade,
            indice_de_argila=indice_de_argila,
            indice_de_areia=indice_de_areia,
            indice_de_silte=indice_de_silte,
            carga_eletrica=carga_eletrica,
        )

    def salve(self, terreno: Terreno) -> None:
        with self.armazenamento.trava_terrenos:
            _substitua_ou_acrescente(self.armazenamento.terrenos, terreno)

    def liste_todos_do_usuario(self, usuario: Usuario) -> list[Terreno]:
        with self.armazenamento.trava_terrenos:
            return [
                terreno.copia()
                for terreno in self.armazenamento.terrenos
                if terreno.proprietario.id == usuario.id
            ]


class UsuariosDaoEmMemoria(_DaoEmMemoria, UsuariosDao):
    """Users kept in memory."""

    def encontre(self, id_usuario: str) -> Optional[Usuario]:
        with self.armazenamento.trava_usuarios:
            usuarios = self.armazenamento.usuarios
            posicao = _indice_por_id(usuarios, id_usuario)
            return None if posicao is None else usuarios[posicao].copia()

    def coloque(self, usuario: Usuario) -> None:
        with self.armazenamento.trava_usuarios:
            self.armazenamento.usuarios.append(usuario)