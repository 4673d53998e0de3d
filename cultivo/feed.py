"""Feed entities: posts and comments, both of which can be reported."""

from __future__ import annotations

from typing import Optional

from cultivo.enums import TipoDoDenunciavel
from cultivo.moderacao import Denunciavel
from cultivo.usuario import Usuario
from cultivo.util import agora


class Comentavel(Denunciavel):
    """Published text that can be commented on, deactivated and reported."""

    def __init__(self, conteudo: str, tipo: TipoDoDenunciavel) -> None:
        super().__init__(tipo)
        self.conteudo = conteudo
        self.data_publicacao: int = agora()
        self.data_remocao: Optional[int] = None
        self.esta_ativo = True

    def desativar(self) -> None:
        """Mark the content as removed now."""
        self.data_remocao = agora()
        self.esta_ativo = False


class Postagem(Comentavel):
    """A titled post written by a user."""

    def __init__(self, autor: Usuario, titulo: str, conteudo: str) -> None:
        super().__init__(conteudo, TipoDoDenunciavel.POSTAGEM)
        self.titulo = titulo
        self.autor = autor

    def __repr__(self) -> str:
        return f"Postagem(id={self.id!r}, titulo={self.titulo!r})"


class Comentario(Comentavel):
    """A comment written by a user on a post."""

    def __init__(self, autor: Usuario, postagem: Postagem, conteudo: str) -> None:
        super().__init__(conteudo, TipoDoDenunciavel.COMENTARIO)
        self.autor = autor
        self.postagem = postagem

    def __repr__(self) -> str:
        return f"Comentario(id={self.id!r}, postagem={self.postagem.id!r})"