"""The user entity."""

from __future__ import annotations

from typing import Optional

from cultivo.enums import Cargo, TipoDoDenunciavel
from cultivo.moderacao import Denunciavel


class Usuario(Denunciavel):
    """A registered user; users can themselves be reported."""

    def __init__(
        self,
        nome: str,
        email: str,
        hash_da_senha: str,
        data_de_nascimento: int,
        cargo: Cargo,
        *,
        id: Optional[str] = None,
    ) -> None:
        super().__init__(TipoDoDenunciavel.USUARIO, id=id)
        self.nome = nome
        self.email = email
        self.hash_da_senha = hash_da_senha
        self.data_de_nascimento = data_de_nascimento
        self.cargo = cargo

    def copia(self) -> "Usuario":
        """Return an independent copy with the same id."""
        return Usuario(
            self.nome,
            self.email,
            self.hash_da_senha,
            self.data_de_nascimento,
            self.cargo,
            id=self.id,
        )

    def __repr__(self) -> str:
        return (
            f"Usuario(id={self.id!r}, nome={self.nome!r}, email={self.email!r}, "
            f"cargo={self.cargo.name})"
        )