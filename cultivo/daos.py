"""Abstract data-access interfaces of the domain."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from cultivo.enums import MotivoDaDenuncia
from cultivo.moderacao import Denuncia, Denunciavel
from cultivo.terreno import Planta, Plantacao, Solo, Terreno
from cultivo.usuario import Usuario


class DenunciavelDao(ABC):
    """Access to some kind of reportable entity."""

    @abstractmethod
    def encontre(self, id_denunciavel: str) -> Optional[Denunciavel]:
        """Return the entity with the given id, or ``None``."""


class UsuariosDao(DenunciavelDao):
    """Access to users; ``encontre`` returns a copy of the stored user."""

    @abstractmethod
    def coloque(self, usuario: Usuario) -> None:
        """Store a new user."""


class DenunciasDao(ABC):
    """Access to reports."""

    @abstractmethod
    def liste(self) -> list[Denuncia]:
        """Return copies of every stored report."""

    @abstractmethod
    def crie(
        self,
        motivo: MotivoDaDenuncia,
        detalhes: Optional[str],
        relator: Usuario,
        denunciavel: Denunciavel,
    ) -> Denuncia:
        """Create and store a pending report, returning it."""

    @abstractmethod
    def salve(self, denuncia: Denuncia) -> None:
        """Store the report, replacing any with the same id."""

    @abstractmethod
    def encontre(self, id_denuncia: str) -> Optional[Denuncia]:
        """Return a copy of the report with the given id, or ``None``."""


class PlantacoesDao(ABC):
    """Access to plantings."""

    @abstractmethod
    def encontre(self, id_plantacao: str) -> Optional[Plantacao]:
        """Return a copy of the planting with the given id, or ``None``."""

    @abstractmethod
    def crie(self, planta: Planta, terreno: Terreno) -> Plantacao:
        """Create and store a planting, returning it."""

    @abstractmethod
    def salve(self, plantacao: Plantacao) -> None:
        """Store the planting, replacing any with the same id."""


class PlantasDao(ABC):
    """Access to the plant catalogue."""

    @abstractmethod
    def encontre_plantas_correspondentes(self, solo: Solo) -> list[Planta]:
        """Return the plants suited to the given soil."""

    @abstractmethod
    def encontre(self, id_planta: str) -> Optional[Planta]:
        """Return the plant with the given id, or ``None``."""

    @abstractmethod
    def liste(self) -> list[Planta]:
        """Return every plant in the catalogue."""


class TerrenosDao(ABC):
    """Access to plots of land."""

    @abstractmethod
    def encontre(self, id_terreno: str) -> Optional[Terreno]:
        """Return a copy of the plot with the given id, or ``None``."""

    @abstractmethod
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
        """Build a soil record from analysis values."""

    @abstractmethod
    def salve(self, terreno: Terreno) -> None:
        """Store the plot, replacing any with the same id."""

    @abstractmethod
    def liste_todos_do_usuario(self, usuario: Usuario) -> list[Terreno]:
        """Return copies of every plot owned by ``usuario``."""