"""
Suavizadores de Sinal em Fluxo.

Implementa suavização online (amostra a amostra) de sinais escalares
com três métodos: exponencial simples, exponencial dupla (Holt) e
filtro FIR.
"""

from .base import (
    Method,
    SmootherPhase,
    ExponentialCoefficients,
    DoubleExponentialCoefficients,
    FIRCoefficients,
    Coefficients,
)
from .smoother import Smoother, make_smoother
from .builder import (
    build_smoother,
    create_exponential_smoother,
    create_double_exponential_smoother,
    create_fir_smoother,
)

__all__ = [
    # Base
    "Method",
    "SmootherPhase",
    "ExponentialCoefficients",
    "DoubleExponentialCoefficients",
    "FIRCoefficients",
    "Coefficients",
    
    # Smoother
    "Smoother",
    "make_smoother",
    
    # Builder
    "build_smoother",
    "create_exponential_smoother",
    "create_double_exponential_smoother",
    "create_fir_smoother",
]
