"""
Classes base para suavizadores de sinal em fluxo (streaming).

Define o enum de métodos, as fases do suavizador e os coeficientes
de cada método como uma variante rotulada: cada método carrega
seu próprio payload tipado.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional, Union

import numpy as np


class Method(IntEnum):
    """
    Métodos de suavização suportados.

    Os valores inteiros são estáveis (podem ser usados para serialização).
    """

    EXPONENTIAL = 0
    DOUBLE_EXPONENTIAL = 1
    FILTER_FIR = 2

    @property
    def label(self) -> str:
        """Nome canônico do método (usado em configurações)."""
        return _CANONICAL_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "Method":
        """
        Obtém um método pelo nome.

        Args:
            name: Nome canônico ou alias (case-insensitive)

        Returns:
            Método correspondente

        Raises:
            KeyError: Se o nome não for reconhecido
        """
        key = str(name).strip().lower()
        if key not in _NAME_LOOKUP:
            available = sorted(_NAME_LOOKUP.keys())
            raise KeyError(f"Método '{name}' não reconhecido. Disponíveis: {available}")
        return _NAME_LOOKUP[key]


_CANONICAL_NAMES: Dict[Method, str] = {
    Method.EXPONENTIAL: "exponential",
    Method.DOUBLE_EXPONENTIAL: "double_exponential",
    Method.FILTER_FIR: "fir",
}

_NAME_LOOKUP: Dict[str, Method] = {
    "exponential": Method.EXPONENTIAL,
    "ema": Method.EXPONENTIAL,
    "double_exponential": Method.DOUBLE_EXPONENTIAL,
    "holt": Method.DOUBLE_EXPONENTIAL,
    "fir": Method.FILTER_FIR,
    "filter_fir": Method.FILTER_FIR,
}


class SmootherPhase(Enum):
    """
    Fase do suavizador.

    FRESH: nenhuma amostra processada desde a criação/reset; a próxima
           amostra semeia o estado (métodos exponenciais).
    RUNNING: estado já inicializado; a próxima amostra é combinada.
    """

    FRESH = "fresh"
    RUNNING = "running"


@dataclass
class ExponentialCoefficients:
    """Coeficiente da suavização exponencial simples."""
    alpha: float

    def as_dict(self) -> Dict[str, float]:
        return {"alpha": self.alpha}


@dataclass
class DoubleExponentialCoefficients:
    """
    Coeficientes da suavização exponencial dupla (Holt).

    `trend` é estado interno: muda a cada amostra, enquanto
    `alpha` e `beta` ficam fixos.
    """
    alpha: float
    beta: float
    trend: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return {"alpha": self.alpha, "beta": self.beta, "trend": self.trend}


@dataclass
class FIRCoefficients:
    """
    Coeficientes (taps) do filtro FIR e o buffer de histórico.

    O histórico guarda as últimas N entradas, a mais recente no índice 0,
    e sempre tem o mesmo tamanho que `taps`.
    """
    taps: np.ndarray
    history: Optional[np.ndarray] = None

    def __post_init__(self):
        self.taps = np.asarray(self.taps, dtype=float)
        if self.history is None:
            self.history = np.zeros(len(self.taps), dtype=float)

    def clear_history(self) -> None:
        """Zera todas as posições do histórico."""
        self.history.fill(0.0)

    def as_dict(self) -> Dict[str, list]:
        return {"taps": self.taps.tolist(), "history": self.history.tolist()}


Coefficients = Union[ExponentialCoefficients, DoubleExponentialCoefficients, FIRCoefficients]
