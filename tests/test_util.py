import time
import uuid

import pytest

from cultivo.util import agora, aparar_final, aparar_inicio, gerar_uuid


def test_agora_is_between_surrounding_clock_readings():
    antes = int(time.time())
    valor = agora()
    depois = int(time.time())
    assert antes <= valor <= depois


def test_gerar_uuid_is_canonical_version_4():
    texto = gerar_uuid()
    analisado = uuid.UUID(texto)
    assert str(analisado) == texto
    assert analisado.version == 4


def test_gerar_uuid_is_unique():
    ids = {gerar_uuid() for _ in range(200)}
    assert len(ids) == 200


@pytest.mark.parametrize(
    "entrada, esperado",
    [
        ("  abc ", "abc "),
        ("\t\n\v\f\rabc", "abc"),
        ("abc", "abc"),
        ("   ", ""),
        ("", ""),
    ],
)
def test_aparar_inicio(entrada, esperado):
    assert aparar_inicio(entrada) == esperado


@pytest.mark.parametrize(
    "entrada, esperado",
    [
        ("  abc ", "  abc"),
        ("abc\t\n\v\f\r", "abc"),
        ("abc", "abc"),
        ("   ", ""),
        ("", ""),
    ],
)
def test_aparar_final(entrada, esperado):
    assert aparar_final(entrada) == esperado


def test_inner_whitespace_is_kept():
    assert aparar_final(aparar_inicio("  a b  ")) == "a b"