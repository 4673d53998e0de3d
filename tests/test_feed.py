import time

import pytest

from cultivo.enums import Cargo, TipoDoDenunciavel
from cultivo.feed import Comentario, Comentavel, Postagem
from cultivo.usuario import Usuario


@pytest.fixture
def autor():
    return Usuario("Ana", "ana@example.com", "placeholder", 0, Cargo.USUARIO)


@pytest.fixture
def postagem(autor):
    return Postagem(autor, "Colheita", "Colhi os tomates hoje.")


def test_postagem_guarda_dados(postagem, autor):
    assert postagem.titulo == "Colheita"
    assert postagem.conteudo == "Colhi os tomates hoje."
    assert postagem.autor is autor
    assert postagem.tipo is TipoDoDenunciavel.POSTAGEM


def test_postagem_nova_esta_ativa(postagem):
    assert postagem.esta_ativo is True
    assert postagem.data_remocao is None


def test_data_publicacao_e_atual(autor):
    antes = int(time.time())
    nova = Postagem(autor, "t", "c")
    depois = int(time.time())
    assert antes <= nova.data_publicacao <= depois


def test_desativar_marca_remocao(postagem):
    antes = int(time.time())
    postagem.desativar()
    depois = int(time.time())
    assert postagem.esta_ativo is False
    assert postagem.data_remocao is not None
    assert antes <= postagem.data_remocao <= depois
    assert postagem.data_remocao >= postagem.data_publicacao


def test_comentario_referencia_postagem(autor, postagem):
    comentario = Comentario(autor, postagem, "Que bom!")
    assert comentario.postagem is postagem
    assert comentario.autor is autor
    assert comentario.conteudo == "Que bom!"
    assert comentario.tipo is TipoDoDenunciavel.COMENTARIO


def test_conteudo_e_titulo_podem_mudar(postagem):
    postagem.conteudo = "Novo texto"
    postagem.titulo = "Novo título"
    assert postagem.conteudo == "Novo texto"
    assert postagem.titulo == "Novo título"


def test_ids_sao_distintos(autor, postagem):
    comentarios = [Comentario(autor, postagem, "x") for _ in range(5)]
    ids = {c.id for c in comentarios} | {postagem.id}
    assert len(ids) == len(comentarios) + 1


def test_comentavel_usa_tipo_dado():
    comentavel = Comentavel("texto", TipoDoDenunciavel.COMENTARIO)
    assert comentavel.tipo is TipoDoDenunciavel.COMENTARIO
    assert comentavel.conteudo == "texto"