"""Interactive use cases built on top of the managers."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from cultivo.gerentes import GerenteDeTerrenos
from cultivo.validacao import ForaDoIntervaloError

_SEPARADOR = "=============="


def _como_byte(valor: int) -> int:
    """Wrap an integer into the 0..255 range, as an unsigned byte would."""
    return valor % 256


def _leia_float(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ValueError(f'"{token}" não é um número válido') from None


def _leia_inteiro(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f'"{token}" não é um número inteiro válido') from None


class InserirResultadoDeAnaliseDeSolo:
    """Asks the user for a plot and its soil analysis, then stores it."""

    def __init__(
        self,
        gerente_de_terrenos: GerenteDeTerrenos,
        entrada: Optional[TextIO] = None,
        saida: Optional[TextIO] = None,
    ) -> None:
        self.gerente_de_terrenos = gerente_de_terrenos
        self._entrada = entrada
        self._saida = saida

    @property
    def entrada(self) -> TextIO:
        return self._entrada if self._entrada is not None else sys.stdin

    @property
    def saida(self) -> TextIO:
        return self._saida if self._saida is not None else sys.stdout

    def _escreva(self, texto: str) -> None:
        self.saida.write(texto)
        self.saida.flush()

    def _tokens(self) -> Iterator[str]:
        for linha in iter(self.entrada.readline, ""):
            yield from linha.split()

    def _pergunte(self, tokens: Iterator[str], pergunta: str) -> str:
        self._escreva(f"{pergunta}\n> ")
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("A entrada terminou antes do esperado.") from None

    def executar(self, id_usuario: str) -> None:
        """List the user's plots and record a soil analysis for one of them."""
        terrenos = self.gerente_de_terrenos.liste_terrenos(id_usuario)

        self._escreva("Listando todos os seus terrenos:\n")
        for terreno in terrenos:
            ativa = "Sim" if terreno.plantacao_ativa is not None else "Não"
            self._escreva(
                f"ID: {terreno.id}"
                f"\nComprimento: {terreno.comprimento}"
                f"\nLargura: {terreno.largura}"
                f"\nTem plantação ativa?: {ativa}"
                f"\n{_SEPARADOR}\n\n"
            )

        tokens = self._tokens()
        id_terreno = self._pergunte(
            tokens,
            "Escolha um terreno pelo ID para atualizar as informações do solo:",
        )
        self._escreva(f'Selecionado o terreno de id: "{id_terreno}".\n')

        acidez = self._pergunte(tokens, "Qual a acidez do solo?")
        minerais = self._pergunte(tokens, "Qual o índice de minerais do solo?")
        argila = self._pergunte(tokens, "Qual o índice de argila do solo?")
        silte = self._pergunte(tokens, "Qual o índice de silte do solo?")
        carga = self._pergunte(tokens, "Qual a carga elétrica do solo?")

        try:
            self.gerente_de_terrenos.receba_dados_do_solo(
                id_terreno,
                _leia_float(acidez),
                _como_byte(_leia_inteiro(minerais)),
                0,
                _como_byte(_leia_inteiro(argila)),
                _como_byte(_leia_inteiro(silte)),
                _como_byte(_leia_inteiro(carga)),
            )
        except ForaDoIntervaloError as erro:
            self._escreva(
                "Você forneceu algum valor fora do intervalo permitido: "
                f"{erro}. Tente novamente.\n"
            )
        except ValueError as erro:
            self._escreva(
                f"Você forneceu algum dado incorreto: {erro}. Tente novamente.\n"
            )