"""Gestão de terrenos agrícolas: análise de solo, sugestão de plantas, plantações e denúncias."""

__version__ = "0.1.0"