"""Validation of soil analysis data."""

from __future__ import annotations

from cultivo.terreno import Solo

LIMITE_DO_INTERVALO = 100


class ForaDoIntervaloError(Exception):
    """Raised when a value lies outside its permitted range."""


def valide_solo(solo: Solo) -> Solo:
    """Check a soil record and return it unchanged.

    Raises ``ValueError`` for a negative acidity or electric charge and
    ``ForaDoIntervaloError`` for an index outside 0 to 100.
    """
    if solo.acidez < 0:
        raise ValueError("A acidez do solo não pode ser negativa.")

    indices = (
        solo.indice_de_areia,
        solo.indice_de_argila,
        solo.indice_de_minerais,
        solo.indice_de_salinidade,
        solo.indice_de_silte,
    )
    if any(not 0 <= indice <= LIMITE_DO_INTERVALO for indice in indices):
        raise ForaDoIntervaloError("Os índices devem estar entre 0 e 100.")

    if solo.carga_eletrica < 0:
        raise ValueError("A carga elétrica não pode ser negativa.")

    return solo