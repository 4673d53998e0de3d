"""Moderation entities: reportable things and the reports made about them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from cultivo.enums import EstadoDaDenuncia, MotivoDaDenuncia, TipoDoDenunciavel
from cultivo.util import gerar_uuid

if TYPE_CHECKING:
    from cultivo.usuario import Usuario


class Denunciavel:
    """Base of every entity that can be reported; carries an id and a kind."""

    def __init__(self, tipo: TipoDoDenunciavel, *, id: Optional[str] = None) -> None:
        self.id = id if id is not None else gerar_uuid()
        self.tipo = tipo


@dataclass(eq=False)
class Denuncia:
    """A report made by a user about a reportable entity."""

    detalhes: Optional[str]
    motivo: MotivoDaDenuncia
    estado: EstadoDaDenuncia
    relator: "Usuario" = field(repr=False)
    denunciavel: Denunciavel = field(repr=False)
    moderador_investigador: Optional["Usuario"] = field(default=None, repr=False)
    moderador_resolutor: Optional["Usuario"] = field(default=None, repr=False)
    id: str = field(default_factory=gerar_uuid)

    def copia(self) -> "Denuncia":
        """Return a shallow copy that keeps the same id."""
        return dataclasses.replace(self)