import io

from cultivo.armazenamento import Armazenamento
from cultivo.cli import construa_aplicativo, main
from cultivo.daos import TerrenosDao, UsuariosDao
from cultivo.enums import Cargo, Clima, ExposicaoSolar
from cultivo.terreno import Terreno
from cultivo.usuario import Usuario


def test_construa_registra_usuario_e_daos():
    armazenamento = Armazenamento()
    aplicativo = construa_aplicativo(armazenamento, io.StringIO(), io.StringIO())

    usuario = aplicativo.contexto.obtenha(Usuario)
    assert usuario.nome == "John Doe"
    assert usuario.cargo is Cargo.USUARIO
    assert [u.id for u in armazenamento.usuarios] == [usuario.id]
    encontrado = aplicativo.contexto.obtenha(UsuariosDao).encontre(usuario.id)
    assert encontrado.id == usuario.id
    assert set(aplicativo.rotas) == {"inserir-resultado-de-analise-de-solo"}


def test_rodar_lista_rotas_e_sai():
    saida = io.StringIO()
    aplicativo = construa_aplicativo(Armazenamento(), io.StringIO("sair\n"), saida)
    aplicativo.rodar()
    texto = saida.getvalue()
    assert (
        "[inserir-resultado-de-analise-de-solo] Inserir Resultado de Análise de Solo"
        in texto
    )
    assert "Tentou acessar uma rota inválida." not in texto


def test_rota_invalida():
    saida = io.StringIO()
    aplicativo = construa_aplicativo(
        Armazenamento(), io.StringIO("inexistente\nsair\n"), saida
    )
    aplicativo.rodar()
    assert "Tentou acessar uma rota inválida." in saida.getvalue()


def test_rota_de_analise_de_solo_guarda_solo():
    armazenamento = Armazenamento()
    entrada = io.StringIO()
    saida = io.StringIO()
    aplicativo = construa_aplicativo(armazenamento, entrada, saida)

    usuario = aplicativo.contexto.obtenha(Usuario)
    terreno = Terreno(5, 8, ExposicaoSolar.SOMBRA, Clima.POLAR, usuario)
    armazenamento.terrenos.append(terreno)

    entrada.write(
        "inserir-resultado-de-analise-de-solo\n"
        f"{terreno.id}\n6\n50\n40\n30\n20\n"
        "sair\n"
    )
    entrada.seek(0)
    aplicativo.rodar()

    guardado = aplicativo.contexto.obtenha(TerrenosDao).encontre(terreno.id)
    assert guardado.solo.acidez == 6.0
    assert guardado.solo.indice_de_silte == 30
    assert f"ID: {terreno.id}" in saida.getvalue()


def test_main_com_seed(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sair\n"))
    assert main(["--seed"]) == 0
    texto = capsys.readouterr().out
    assert texto.startswith("Populando os armazenamentos em memória...\n")
    assert "Digite \"sair\" para encerrar a sessão." in texto


def test_main_sem_seed(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sair\n"))
    assert main([]) == 0
    texto = capsys.readouterr().out
    assert "Populando" not in texto
    assert "Listando todas as rotas registradas:" in texto