"""
Stream Smoother - suavização online de sinais escalares.

Cada amostra chega uma a uma; o suavizador mantém apenas o estado
necessário e devolve a saída suavizada após cada amostra.
"""

from .components.signal_processing.smoothers import (
    Method,
    SmootherPhase,
    Smoother,
    make_smoother,
    build_smoother,
    create_exponential_smoother,
    create_double_exponential_smoother,
    create_fir_smoother,
)

__version__ = "1.0.0"

__all__ = [
    "Method",
    "SmootherPhase",
    "Smoother",
    "make_smoother",
    "build_smoother",
    "create_exponential_smoother",
    "create_double_exponential_smoother",
    "create_fir_smoother",
]
