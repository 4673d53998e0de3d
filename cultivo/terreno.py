"""Land entities: plants, soil, plots and the plantings on them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from cultivo.enums import Clima, ExposicaoSolar
from cultivo.util import agora, gerar_uuid

if TYPE_CHECKING:
    from cultivo.usuario import Usuario


@dataclass
class Planta:
    """A plant species and the conditions it needs."""

    ph_ideal: int
    indice_de_nitrogenio: int
    indice_de_fosforo: int
    indice_de_potassio: int
    indice_de_retencao_de_agua: int
    aceita_vento: bool
    clima: Clima
    exposicao_solar: ExposicaoSolar
    id: str = field(default_factory=gerar_uuid)


@dataclass(frozen=True)
class Solo:
    """Result of a soil analysis; indices range from 0 to 100."""

    acidez: float
    indice_de_minerais: int
    indice_de_salinidade: int
    indice_de_argila: int
    indice_de_areia: int
    indice_de_silte: int
    carga_eletrica: float


@dataclass(eq=False)
class Plantacao:
    """A planting of a plant on a plot, with its start and end dates."""

    planta: Planta
    terreno: "Terreno" = field(repr=False)
    id: str = field(default_factory=gerar_uuid)
    data_de_inicio: int = field(default_factory=agora)
    data_de_finalizacao: Optional[int] = None
    data_de_desistencia: Optional[int] = None

    def cancele(self) -> None:
        """Record that the planting was abandoned now."""
        self.data_de_desistencia = agora()

    def finalize(self) -> None:
        """Record that the planting was finished now."""
        self.data_de_finalizacao = agora()


@dataclass(eq=False)
class Terreno:
    """A plot of land owned by a user."""

    largura: int
    comprimento: int
    exposicao_solar: ExposicaoSolar
    clima: Clima
    proprietario: "Usuario" = field(repr=False)
    id: str = field(default_factory=gerar_uuid)
    solo: Optional[Solo] = None
    plantacao_ativa: Optional[Plantacao] = field(default=None, repr=False)

    @property
    def tamanho(self) -> int:
        """Area of the plot."""
        return self.largura * self.comprimento

    def copia(self) -> "Terreno":
        """Return a copy with the same id, sharing the active planting."""
        return dataclasses.replace(self)

    def atualize_solo(self, solo: Solo) -> None:
        """Replace the soil information of the plot."""
        self.solo = solo

    def coloque_plantacao_ativa(self, plantacao: Plantacao) -> None:
        """Attach a new active planting; raises ``ValueError`` if one exists."""
        if self.plantacao_ativa is not None:
            raise ValueError(
                f'Já existe uma plantação ativa no Terreno de id "{self.id}".'
            )
        self.plantacao_ativa = plantacao

    def finalize_plantacao_ativa(self) -> None:
        """Finish the active planting, if any, and detach it."""
        if self.plantacao_ativa is not None:
            self.plantacao_ativa.finalize()
        self.plantacao_ativa = None

    def desista_da_plantacao_ativa(self) -> None:
        """Abandon the active planting, if any, and detach it."""
        if self.plantacao_ativa is not None:
            self.plantacao_ativa.cancele()
        self.plantacao_ativa = None