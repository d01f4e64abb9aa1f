"""Configuração do cliente Cielo (settings e logging)."""

from cielo.config.settings import CieloSettings, get_cielo_settings

__all__ = [
    "CieloSettings",
    "get_cielo_settings",
]
