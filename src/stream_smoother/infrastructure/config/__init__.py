"""
Configuração da biblioteca.
"""

from .settings import Settings, get_settings, configure_logging
from .preset_loader import (
    load_preset,
    list_presets,
    list_categories,
    resolve_preset_reference,
)
from .schemas import SmootherConfig

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "load_preset",
    "list_presets",
    "list_categories",
    "resolve_preset_reference",
    "SmootherConfig",
]
