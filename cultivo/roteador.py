"""Menu-driven router with a minimal dependency container."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterator, TextIO, TypeVar

from cultivo.util import aparar_final, aparar_inicio

T = TypeVar("T")


class DependenciaNaoEncontrada(LookupError):
    """Raised when a context holds no dependency of the requested type."""

    def __init__(self, tipo: type) -> None:
        self.tipo = tipo
        nome = getattr(tipo, "__qualname__", repr(tipo))
        super().__init__(f"Dependência do tipo '{nome}' não encontrada no contexto")


class Contexto:
    """Very small dependency container keyed by type."""

    def __init__(self) -> None:
        self._container: dict[type, object] = {}

    def coloque(self, instancia: object, tipo: type | None = None) -> None:
        """Register ``instancia`` under ``tipo`` (its own type by default)."""
        chave = tipo if tipo is not None else type(instancia)
        self._container[chave] = instancia

    def obtenha(self, tipo: type[T]) -> T:
        """Return the dependency registered under ``tipo``."""
        try:
            return self._container[tipo]  # type: ignore[return-value]
        except KeyError:
            raise DependenciaNaoEncontrada(tipo) from None


HandlerFunction = Callable[[Contexto], None]


@dataclass(frozen=True)
class Rota:
    """A named entry point to a feature of the system."""

    nome: str
    handler: HandlerFunction


class Aplicativo:
    """Router that reads route keys and dispatches to their handlers."""

    def __init__(self, entrada: TextIO | None = None, saida: TextIO | None = None) -> None:
        self.rotas: dict[str, Rota] = {}
        self.contexto = Contexto()
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

    def liste_as_rotas(self) -> None:
        """Print every registered route with its key."""
        self._escreva("Listando todas as rotas registradas:\n\n")
        for chave, rota in self.rotas.items():
            self._escreva(f"[{chave}] {rota.nome}\n")
        self._escreva(
            "\nPara acessar uma funcionalidade, digite o código entre os colchetes.\n"
        )

    def registrar_rota(self, chave: str, nome: str, handler: HandlerFunction) -> None:
        """Register (or replace) the route under ``chave``."""
        self.rotas[chave] = Rota(nome, handler)

    def executar_rota(self, chave: str) -> None:
        """Run the handler of ``chave``, or report that the route is invalid."""
        rota = self.rotas.get(chave)
        if rota is None:
            self._escreva("Tentou acessar uma rota inválida.\n")
            return
        rota.handler(self.contexto)

    def _exiba_mensagem_padrao(self) -> None:
        self.liste_as_rotas()
        self._escreva('Digite "sair" para encerrar a sessão.\n> ')

    def _tokens(self) -> Iterator[str]:
        for linha in self.entrada:
            yield from linha.split()

    def rodar(self) -> None:
        """Read whitespace-separated commands until "sair" or end of input."""
        self._exiba_mensagem_padrao()
        for token in self._tokens():
            comando = aparar_final(aparar_inicio(token))

            if comando == "sair":
                break

            if comando == "voltar":
                self._escreva("\033[2J\033[H")
                self._exiba_mensagem_padrao()
                continue

            self.executar_rota(comando)
            self._escreva(
                'Digite "sair" para encerrar a sessão. Digite '
                '"voltar" para voltar ao menu.\n> '
            )