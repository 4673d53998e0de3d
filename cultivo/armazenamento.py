"""In-memory storage shared by the in-memory data-access objects."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import MutableSequence

from cultivo.enums import Clima, ExposicaoSolar
from cultivo.moderacao import Denuncia
from cultivo.terreno import Planta, Plantacao, Terreno
from cultivo.usuario import Usuario


def _trava() -> threading.Lock:
    return field(default_factory=threading.Lock, repr=False, compare=False)


@dataclass
class Armazenamento:
    """One list per entity kind, each guarded by its own lock."""

    plantas: list[Planta] = field(default_factory=list)
    usuarios: list[Usuario] = field(default_factory=list)
    denuncias: list[Denuncia] = field(default_factory=list)
    terrenos: list[Terreno] = field(default_factory=list)
    plantacoes: list[Plantacao] = field(default_factory=list)
    trava_plantas: threading.Lock = _trava()
    trava_usuarios: threading.Lock = _trava()
    trava_denuncias: threading.Lock = _trava()
    trava_terrenos: threading.Lock = _trava()
    trava_plantacoes: threading.Lock = _trava()

    def popular(self) -> None:
        """Seed the plant catalogue with the default plants."""
        with self.trava_plantas:
            preencha_plantas(self.plantas)


_PLANTAS_PADRAO = (
    (6, 50, 40, 30, 35, True, Clima.TROPICAL, ExposicaoSolar.SOL_PLENO),
    (7, 60, 50, 40, 45, False, Clima.TEMPERADO, ExposicaoSolar.MEIA_SOMBRA),
    (5, 40, 30, 20, 25, True, Clima.ARIDO, ExposicaoSolar.SOL_PLENO),
    (6, 55, 45, 35, 40, False, Clima.MEDITERRANEO, ExposicaoSolar.SOL_PLENO),
    (7, 65, 55, 45, 50, True, Clima.TROPICAL, ExposicaoSolar.MEIA_SOMBRA),
    (5, 35, 25, 15, 20, False, Clima.TEMPERADO, ExposicaoSolar.SOL_PLENO),
    (6, 70, 60, 50, 55, True, Clima.ARIDO, ExposicaoSolar.SOL_PLENO),
    (7, 75, 65, 55, 60, False, Clima.MEDITERRANEO, ExposicaoSolar.SOL_PLENO),
    (5, 45, 35, 25, 30, True, Clima.TROPICAL, ExposicaoSolar.MEIA_SOMBRA),
    (6, 80, 70, 60, 65, False, Clima.TEMPERADO, ExposicaoSolar.SOL_PLENO),
)


def preencha_plantas(plantas: MutableSequence[Planta]) -> None:
    """Append the default plants, each with a fresh id, to ``plantas``."""
    plantas.extend(Planta(*dados) for dados in _PLANTAS_PADRAO)