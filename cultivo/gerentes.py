"""Managers that carry out the domain operations through the context's DAOs."""

from __future__ import annotations

import dataclasses
from typing import Optional

from cultivo.daos import (
    DenunciasDao,
    DenunciavelDao,
    PlantacoesDao,
    PlantasDao,
    TerrenosDao,
    UsuariosDao,
)
from cultivo.enums import EstadoDaDenuncia, TipoDoDenunciavel, tipo_do_denunciavel_para_string
from cultivo.moderacao import Denuncia
from cultivo.roteador import Contexto
from cultivo.terreno import Planta, Plantacao, Terreno
from cultivo.usuario import Usuario
from cultivo.validacao import valide_solo


def _terreno_obrigatorio(terrenos_dao: TerrenosDao, id_terreno: str) -> Terreno:
    terreno = terrenos_dao.encontre(id_terreno)
    if terreno is None:
        raise ValueError(
            f'Não foi possível encontrar um terreno com id "{id_terreno}".'
        )
    return terreno


class GerenteDeDaosDeDenunciaveis:
    """Picks the DAO that serves a given kind of reportable entity."""

    def __init__(self, contexto: Contexto) -> None:
        self.contexto = contexto

    def obtenha_dao(self, tipo: TipoDoDenunciavel) -> DenunciavelDao:
        """Return the DAO for ``tipo``; only users are supported."""
        if tipo is TipoDoDenunciavel.USUARIO:
            return self.contexto.obtenha(UsuariosDao)
        raise NotImplementedError(
            f"Dao da entidade {tipo_do_denunciavel_para_string(tipo)} "
            "ainda não foi implementado."
        )


class GerenteDeDenuncias:
    """Operations on reports.

    Reports are handed out as copies; changes go through the methods here.
    """

    def __init__(self, contexto: Contexto) -> None:
        self.contexto = contexto

    def liste_denuncias(self) -> list[Denuncia]:
        """Return copies of every report."""
        return self.contexto.obtenha(DenunciasDao).liste()

    def obtenha_denuncia(self, id_denuncia: str) -> Optional[Denuncia]:
        """Return a copy of the report with the given id, or ``None``."""
        return self.contexto.obtenha(DenunciasDao).encontre(id_denuncia)

    def _denuncia_e_moderador(
        self, id_moderador: str, id_denuncia: str
    ) -> tuple[DenunciasDao, Denuncia, Usuario]:
        denuncias_dao = self.contexto.obtenha(DenunciasDao)
        denuncia = denuncias_dao.encontre(id_denuncia)
        if denuncia is None:
            raise ValueError(
                f'Não foi possível encontrar a denúncia o com id "{id_denuncia}".'
            )

        moderador = self.contexto.obtenha(UsuariosDao).encontre(id_moderador)
        if moderador is None:
            raise ValueError(
                f'Não foi possível encontrar o moderador com id "{id_moderador}".'
            )
        return denuncias_dao, denuncia, moderador  # type: ignore[return-value]

    def marque_como_investigando(self, id_moderador: str, id_denuncia: str) -> None:
        """Put the report under analysis by the given moderator."""
        dao, denuncia, moderador = self._denuncia_e_moderador(id_moderador, id_denuncia)
        denuncia.moderador_investigador = moderador
        denuncia.estado = EstadoDaDenuncia.ANALISE
        dao.salve(denuncia)

    def marque_como_resolvida(self, id_moderador: str, id_denuncia: str) -> None:
        """Mark the report as resolved by the given moderator."""
        dao, denuncia, moderador = self._denuncia_e_moderador(id_moderador, id_denuncia)
        denuncia.estado = EstadoDaDenuncia.RESOLVIDO
        denuncia.moderador_resolutor = moderador
        dao.salve(denuncia)


class GerenteDePlantacoes:
    """Operations on the plant catalogue."""

    def __init__(self, contexto: Contexto) -> None:
        self.contexto = contexto

    def liste_plantas(self) -> list[Planta]:
        """Return every plant in the catalogue."""
        return self.contexto.obtenha(PlantasDao).liste()


class GerenteDeTerrenos:
    """Operations on plots of land and their plantings."""

    def __init__(self, contexto: Contexto) -> None:
        self.contexto = contexto

    def obtenha_sugestoes(self, id_terreno: str) -> list[Planta]:
        """Return the plants suited to the soil of the plot."""
        terrenos_dao = self.contexto.obtenha(TerrenosDao)
        plantas_dao = self.contexto.obtenha(PlantasDao)

        terreno = _terreno_obrigatorio(terrenos_dao, id_terreno)
        if terreno.solo is None:
            raise ValueError(
                "O terreno deve ter informações do seu solo registrado para prosseguir."
            )
        return plantas_dao.encontre_plantas_correspondentes(terreno.solo)

    def liste_terrenos(self, id_usuario: str) -> list[Terreno]:
        """Return copies of every plot owned by the user."""
        terrenos_dao = self.contexto.obtenha(TerrenosDao)
        usuario = self.contexto.obtenha(UsuariosDao).encontre(id_usuario)
        if usuario is None:
            raise ValueError(f'Nâo existe um usuário com id "{id_usuario}".')
        return terrenos_dao.liste_todos_do_usuario(usuario)  # type: ignore[arg-type]

    def receba_dados_do_solo(
        self,
        id_terreno: str,
        acidez: float,
        indice_de_minerais: int,
        indice_de_salinidade: int,
        indice_de_argila: int,
        indice_de_silte: int,
        carga_eletrica: float,
    ) -> None:
        """Validate a soil analysis and store it on the plot.

        The sand index is taken to be the clay index.
        """
        terrenos_dao = self.contexto.obtenha(TerrenosDao)
        solo = terrenos_dao.crie_solo(
            acidez,
            indice_de_minerais,
            indice_de_salinidade,
            indice_de_argila,
            indice_de_silte,
            indice_de_argila,
            carga_eletrica,
        )
        valide_solo(solo)

        terreno = _terreno_obrigatorio(terrenos_dao, id_terreno)
        terreno.atualize_solo(solo)
        terrenos_dao.salve(terreno)

    def finalize_plantacao(self, id_terreno: str) -> None:
        """Finish the active planting of the plot."""
        terrenos_dao = self.contexto.obtenha(TerrenosDao)
        # The copy shares the stored planting, so the planting itself is updated.
        terreno = _terreno_obrigatorio(terrenos_dao, id_terreno)
        terreno.finalize_plantacao_ativa()
        terrenos_dao.salve(terreno)

    def desista_da_plantacao(self, id_terreno: str) -> None:
        """Abandon the active planting of the plot."""
        terrenos_dao = self.contexto.obtenha(TerrenosDao)
        terreno = _terreno_obrigatorio(terrenos_dao, id_terreno)
        terreno.desista_da_plantacao_ativa()
        terrenos_dao.salve(terreno)

    def adicione_plantacao(self, id_terreno: str, id_planta: str) -> Plantacao:
        """Start a planting of the plant on the plot, finishing any active one."""
        plantas_dao = self.contexto.obtenha(PlantasDao)
        plantacoes_dao = self.contexto.obtenha(PlantacoesDao)
        terrenos_dao = self.contexto.obtenha(TerrenosDao)

        terreno = _terreno_obrigatorio(terrenos_dao, id_terreno)
        planta = plantas_dao.encontre(id_planta)
        if planta is None:
            raise ValueError(
                f'Não foi possível encontrar uma planta com id"{id_planta}".'
            )

        plantacao = plantacoes_dao.crie(planta, terreno)
        terreno.finalize_plantacao_ativa()
        terreno.coloque_plantacao_ativa(plantacao)
        terrenos_dao.salve(terreno)
        return plantacao

    def obtenha_plantacao(self, id_terreno: str) -> Optional[Plantacao]:
        """Return a copy of the plot's active planting, or ``None``."""
        terrenos_dao = self.contexto.obtenha(TerrenosDao)
        terreno = _terreno_obrigatorio(terrenos_dao, id_terreno)
        if terreno.plantacao_ativa is None:
            return None
        return dataclasses.replace(terreno.plantacao_ativa)