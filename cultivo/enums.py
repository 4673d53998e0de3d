"""Enumerations of the domain, each rendering its display label with ``str``."""

from enum import Enum, auto


class Cargo(Enum):
    """Role of a user in the system."""

    USUARIO = auto()
    MODERADOR = auto()
    ADMINISTRADOR = auto()

    def __str__(self) -> str:
        return _ROTULOS_CARGO[self]


class EstadoDaDenuncia(Enum):
    """Workflow state of a report."""

    PENDENTE = auto()
    ANALISE = auto()
    RESOLVIDO = auto()

    def __str__(self) -> str:
        return _ROTULOS_ESTADO[self]


class MotivoDaDenuncia(Enum):
    """Reason given for a report."""

    CYBERBULLYING = auto()
    DISCURSO_DE_ODIO = auto()
    INCENTIVO_AO_SUICIDIO = auto()
    COMENTARIO_PRECONCEITUOSO = auto()
    SPAM = auto()

    def __str__(self) -> str:
        return _ROTULOS_MOTIVO[self]


class TipoDoDenunciavel(Enum):
    """Kind of entity that can be reported."""

    USUARIO = auto()
    POSTAGEM = auto()
    COMENTARIO = auto()

    def __str__(self) -> str:
        return tipo_do_denunciavel_para_string(self)


class Clima(Enum):
    """Climate of a plot or preferred by a plant."""

    TROPICAL = auto()
    TEMPERADO = auto()
    ARIDO = auto()
    EQUATORIAL = auto()
    SEMI_ARIDO = auto()
    SUBTROPICAL = auto()
    MEDITERRANEO = auto()
    POLAR = auto()
    MONTANHA = auto()

    def __str__(self) -> str:
        return _ROTULOS_CLIMA[self]


class ExposicaoSolar(Enum):
    """Amount of sunlight a plot receives."""

    SOL_PLENO = auto()
    MEIA_SOMBRA = auto()
    SOMBRA = auto()

    def __str__(self) -> str:
        return _ROTULOS_EXPOSICAO[self]


_ROTULOS_CARGO = {
    Cargo.ADMINISTRADOR: "Administrador",
    Cargo.MODERADOR: "Moderador",
    Cargo.USUARIO: "Usuário",
}

# These labels are what the states have always been displayed as.
_ROTULOS_ESTADO = {
    EstadoDaDenuncia.PENDENTE: "Cyberbullying",
    EstadoDaDenuncia.ANALISE: "Discurso de ódio",
    EstadoDaDenuncia.RESOLVIDO: "Incentivo ao suicídio",
}

_ROTULOS_MOTIVO = {
    MotivoDaDenuncia.CYBERBULLYING: "Cyberbullying",
    MotivoDaDenuncia.DISCURSO_DE_ODIO: "Discurso de ódio",
    MotivoDaDenuncia.INCENTIVO_AO_SUICIDIO: "Incentivo ao suicídio",
    MotivoDaDenuncia.COMENTARIO_PRECONCEITUOSO: "Comentário preconceituoso",
    MotivoDaDenuncia.SPAM: "Spam",
}

_ROTULOS_TIPO = {
    TipoDoDenunciavel.USUARIO: "Usuário",
    TipoDoDenunciavel.POSTAGEM: "Postagem",
    TipoDoDenunciavel.COMENTARIO: "Comentário",
}

_ROTULOS_CLIMA = {
    Clima.TROPICAL: "Tropical",
    Clima.TEMPERADO: "Temperado",
    Clima.ARIDO: "Árido",
    Clima.EQUATORIAL: "Equatorial",
    Clima.SEMI_ARIDO: "Semi árido",
    Clima.MEDITERRANEO: "Semiárido",
    Clima.POLAR: "Polar",
    Clima.MONTANHA: "Montanha",
    Clima.SUBTROPICAL: "Subtropical",
}

_ROTULOS_EXPOSICAO = {
    ExposicaoSolar.SOL_PLENO: "Sol pleno",
    ExposicaoSolar.MEIA_SOMBRA: "Meia sombra",
    ExposicaoSolar.SOMBRA: "Sombra",
}


def tipo_do_denunciavel_para_string(tipo: TipoDoDenunciavel) -> str:
    """Return the display label of a reportable kind.

    Raises ``ValueError`` for anything that is not a ``TipoDoDenunciavel``.
    """
    if not isinstance(tipo, TipoDoDenunciavel):
        raise ValueError("Tentativa de stringificar um TipoDoDenunciavel inválido.")
    return _ROTULOS_TIPO[tipo]