"""Small helpers: current time, identifier generation and whitespace trimming."""

import time
import uuid

# The characters the C locale classifies as whitespace.
_ESPACOS = " \t\n\v\f\r"


def agora() -> int:
    """Return the current date and time as whole seconds since the epoch."""
    return int(time.time())


def gerar_uuid() -> str:
    """Return a new random UUID in its canonical textual form."""
    return str(uuid.uuid4())


def aparar_inicio(texto: str) -> str:
    """Return ``texto`` without leading whitespace."""
    return texto.lstrip(_ESPACOS)


def aparar_final(texto: str) -> str:
    """Return ``texto`` without trailing whitespace."""
    return texto.rstrip(_ESPACOS)