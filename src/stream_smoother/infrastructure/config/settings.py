"""
Configurações da biblioteca.

Responsabilidade única: centralizar configurações do ambiente.
"""

import logging
import os
from pathlib import Path
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union


DEFAULT_PRESETS_DIR = Path(__file__).resolve().parent / "presets"
PACKAGE_LOGGER = "stream_smoother"


@dataclass
class Settings:
    """Configurações da biblioteca."""
    
    # Paths
    presets_dir: Path
    
    # Logging
    log_level: str
    
    @classmethod
    def from_env(cls) -> "Settings":
        """Cria configurações a partir de variáveis de ambiente."""
        presets_dir = os.getenv("SMOOTHER_PRESETS_DIR")
        
        return cls(
            presets_dir=Path(presets_dir) if presets_dir else DEFAULT_PRESETS_DIR,
            log_level=os.getenv("SMOOTHER_LOG_LEVEL", "WARNING").upper(),
        )


@lru_cache()
def get_settings() -> Settings:
    """Retorna instância singleton das configurações."""
    return Settings.from_env()


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Aplica o nível de log ao logger do pacote.
    
    Args:
        level: Nível explícito; se None, usa `Settings.log_level`
    
    Returns:
        Logger do pacote configurado
    """
    if level is None:
        level = get_settings().log_level
    
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    return package_logger
