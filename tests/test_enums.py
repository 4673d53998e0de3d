import pytest

from cultivo.enums import (
    Cargo,
    Clima,
    EstadoDaDenuncia,
    ExposicaoSolar,
    MotivoDaDenuncia,
    TipoDoDenunciavel,
    tipo_do_denunciavel_para_string,
)


@pytest.mark.parametrize(
    "membro, rotulo",
    [
        (Cargo.USUARIO, "Usuário"),
        (Cargo.MODERADOR, "Moderador"),
        (Cargo.ADMINISTRADOR, "Administrador"),
    ],
)
def test_cargo_labels(membro, rotulo):
    assert str(membro) == rotulo


@pytest.mark.parametrize(
    "membro, rotulo",
    [
        (EstadoDaDenuncia.PENDENTE, "Cyberbullying"),
        (EstadoDaDenuncia.ANALISE, "Discurso de ódio"),
        (EstadoDaDenuncia.RESOLVIDO, "Incentivo ao suicídio"),
    ],
)
def test_estado_labels(membro, rotulo):
    assert str(membro) == rotulo


@pytest.mark.parametrize(
    "membro, rotulo",
    [
        (MotivoDaDenuncia.CYBERBULLYING, "Cyberbullying"),
        (MotivoDaDenuncia.DISCURSO_DE_ODIO, "Discurso de ódio"),
        (MotivoDaDenuncia.INCENTIVO_AO_SUICIDIO, "Incentivo ao suicídio"),
        (MotivoDaDenuncia.COMENTARIO_PRECONCEITUOSO, "Comentário preconceituoso"),
        (MotivoDaDenuncia.SPAM, "Spam"),
    ],
)
def test_motivo_labels(membro, rotulo):
    assert str(membro) == rotulo


@pytest.mark.parametrize(
    "membro, rotulo",
    [
        (TipoDoDenunciavel.USUARIO, "Usuário"),
        (TipoDoDenunciavel.POSTAGEM, "Postagem"),
        (TipoDoDenunciavel.COMENTARIO, "Comentário"),
    ],
)
def test_tipo_labels(membro, rotulo):
    assert tipo_do_denunciavel_para_string(membro) == rotulo
    assert str(membro) == rotulo


def test_tipo_invalid_raises():
    with pytest.raises(ValueError, match="TipoDoDenunciavel inválido"):
        tipo_do_denunciavel_para_string(Cargo.USUARIO)


@pytest.mark.parametrize(
    "membro, rotulo",
    [
        (Clima.TROPICAL, "Tropical"),
        (Clima.TEMPERADO, "Temperado"),
        (Clima.ARIDO, "Árido"),
        (Clima.EQUATORIAL, "Equatorial"),
        (Clima.SEMI_ARIDO, "Semi árido"),
        (Clima.SUBTROPICAL, "Subtropical"),
        (Clima.MEDITERRANEO, "Semiárido"),
        (Clima.POLAR, "Polar"),
        (Clima.MONTANHA, "Montanha"),
    ],
)
def test_clima_labels(membro, rotulo):
    assert str(membro) == rotulo


@pytest.mark.parametrize(
    "membro, rotulo",
    [
        (ExposicaoSolar.SOL_PLENO, "Sol pleno"),
        (ExposicaoSolar.MEIA_SOMBRA, "Meia sombra"),
        (ExposicaoSolar.SOMBRA, "Sombra"),
    ],
)
def test_exposicao_labels(membro, rotulo):
    assert str(membro) == rotulo


@pytest.mark.parametrize(
    "enum_cls", [Cargo, EstadoDaDenuncia, MotivoDaDenuncia, TipoDoDenunciavel, Clima, ExposicaoSolar]
)
def test_labels_are_distinct_within_enum(enum_cls):
    rotulos = [str(membro) for membro in enum_cls]
    assert len(set(rotulos)) == len(rotulos)


def test_member_order_is_declaration_order():
    assert [str(m) for m in ExposicaoSolar] == ["Sol pleno", "Meia sombra", "Sombra"]
    assert [tipo_do_denunciavel_para_string(m) for m in TipoDoDenunciavel] == [
        "Usuário",
        "Postagem",
        "Comentário",
    ]