from cultivo.armazenamento import Armazenamento, preencha_plantas
from cultivo.enums import Clima, ExposicaoSolar
from cultivo.terreno import Planta


def _dados(planta):
    return (
        planta.ph_ideal,
        planta.indice_de_nitrogenio,
        planta.indice_de_fosforo,
        planta.indice_de_potassio,
        planta.indice_de_retencao_de_agua,
        planta.aceita_vento,
        planta.clima,
        planta.exposicao_solar,
    )


def test_armazenamento_novo_vazio():
    armazenamento = Armazenamento()
    assert armazenamento.plantas == []
    assert armazenamento.usuarios == []
    assert armazenamento.denuncias == []
    assert armazenamento.terrenos == []
    assert armazenamento.plantacoes == []


def test_armazenamentos_sao_independentes():
    primeiro = Armazenamento()
    segundo = Armazenamento()
    primeiro.popular()
    assert segundo.plantas == []
    assert primeiro.plantas is not segundo.plantas
    assert primeiro.trava_plantas is not segundo.trava_plantas


def test_popular_insere_catalogo():
    armazenamento = Armazenamento()
    armazenamento.popular()
    assert len(armazenamento.plantas) == 10


def test_primeira_e_ultima_planta():
    plantas = []
    preencha_plantas(plantas)
    assert _dados(plantas[0]) == (
        6, 50, 40, 30, 35, True, Clima.TROPICAL, ExposicaoSolar.SOL_PLENO,
    )
    assert _dados(plantas[-1]) == (
        6, 80, 70, 60, 65, False, Clima.TEMPERADO, ExposicaoSolar.SOL_PLENO,
    )


def test_ids_unicos():
    plantas = []
    preencha_plantas(plantas)
    assert len({planta.id for planta in plantas}) == len(plantas)


def test_preencha_acrescenta_sem_apagar():
    existente = Planta(1, 2, 3, 4, 5, True, Clima.POLAR, ExposicaoSolar.SOMBRA)
    plantas = [existente]
    preencha_plantas(plantas)
    assert plantas[0] is existente
    antes = len(plantas)
    preencha_plantas(plantas)
    assert len(plantas) == 2 * antes - 1


def test_popular_duas_vezes_gera_novos_ids():
    armazenamento = Armazenamento()
    armazenamento.popular()
    armazenamento.popular()
    metade = len(armazenamento.plantas) // 2
    primeira, segunda = armazenamento.plantas[:metade], armazenamento.plantas[metade:]
    assert [_dados(p) for p in primeira] == [_dados(p) for p in segunda]
    assert {p.id for p in primeira}.isdisjoint({p.id for p in segunda})


def test_trava_liberada_apos_popular():
    armazenamento = Armazenamento()
    armazenamento.popular()
    assert armazenamento.trava_plantas.locked() is False