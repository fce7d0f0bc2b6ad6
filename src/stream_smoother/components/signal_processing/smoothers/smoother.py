"""
Suavizador de sinal em fluxo (streaming).

Recebe amostras escalares uma a uma e mantém apenas o estado
necessário para produzir a saída suavizada após cada amostra,
sem reler amostras passadas.

Uso:
    smoother = make_smoother(Method.EXPONENTIAL, 0.5, 0.0)
    if smoother is None:
        ...  # coeficientes incompatíveis com o método
    smoother.next(1.0)  # 0.5

Uma instância não tem sincronização interna: cada sinal independente
deve ter seu próprio Smoother, e acesso compartilhado entre threads
exige um lock externo.
"""

import logging
import math
from numbers import Real
from typing import Any, Dict, Iterable, Iterator, Optional, Union

import numpy as np

from .base import (
    Coefficients,
    DoubleExponentialCoefficients,
    ExponentialCoefficients,
    FIRCoefficients,
    Method,
    SmootherPhase,
)
from .exponential import double_exponential_next, exponential_next
from .fir import fir_next

logger = logging.getLogger(__name__)


class Smoother:
    """
    Suavizador com estado para um único sinal.

    Não deve ser instanciado diretamente: use `make_smoother`, que
    valida o formato dos coeficientes para o método.
    """

    def __init__(self, method: Method, coefficients: Coefficients, initial_state: float):
        self._method = method
        self._coefficients = coefficients
        self._initial_state = initial_state
        self._state = initial_state
        self._tick_count = 0 if math.isnan(initial_state) else 1
        self._phase = SmootherPhase.FRESH if self._tick_count == 0 else SmootherPhase.RUNNING

    @property
    def method(self) -> Method:
        return self._method

    @property
    def coefficients(self) -> Coefficients:
        return self._coefficients

    @property
    def initial_state(self) -> float:
        return self._initial_state

    @property
    def tick_count(self) -> int:
        """Amostras processadas desde a criação/último reset (começa em 1 se houve estado inicial)."""
        return self._tick_count

    @property
    def phase(self) -> SmootherPhase:
        return self._phase

    def get(self) -> float:
        """Retorna o estado atual (NaN se ainda não inicializado)."""
        return self._state

    def reset(self) -> None:
        """Restaura o estado inicial usado na criação."""
        self.reset_with_state(self._initial_state)

    def reset_with_state(self, state: float) -> None:
        """
        Restaura o suavizador para um estado arbitrário.

        Zera o contador de amostras (a próxima amostra volta a semear
        o estado nos métodos exponenciais) e o histórico do FIR.
        """
        self._tick_count = 0
        self._phase = SmootherPhase.FRESH
        self._state = float(state)

        if isinstance(self._coefficients, FIRCoefficients):
            self._coefficients.clear_history()

        logger.debug("Smoother %s resetado para estado=%s", self._method.label, self._state)

    def next(self, x: float) -> float:
        """
        Processa uma nova amostra e retorna o estado suavizado.

        NaN/Inf na entrada propagam pela aritmética normal de ponto flutuante.
        """
        x = float(x)
        coefficients = self._coefficients
        fresh = self._phase is SmootherPhase.FRESH

        if isinstance(coefficients, ExponentialCoefficients):
            self._state = exponential_next(coefficients, self._state, x, fresh)
        elif isinstance(coefficients, DoubleExponentialCoefficients):
            self._state = double_exponential_next(coefficients, self._state, x, fresh)
        elif isinstance(coefficients, FIRCoefficients):
            self._state = fir_next(coefficients, x)
        else:
            raise TypeError(f"Coeficientes sem regra de atualização: {type(coefficients).__name__}")

        self._tick_count += 1
        self._phase = SmootherPhase.RUNNING
        return self._state

    def feed(self, samples: Iterable[float]) -> Iterator[float]:
        """
        Processa amostras à medida que chegam, produzindo cada saída.

        Uso:
            for y in smoother.feed(sensor_stream):
                ...
        """
        for x in samples:
            yield self.next(x)

    def describe(self) -> Dict[str, Any]:
        """Retorna descrição do suavizador (método, parâmetros e estado)."""
        return {
            "method": self._method.label,
            "ordinal": int(self._method),
            "params": self._coefficients.as_dict(),
            "state": self._state,
            "initial_state": self._initial_state,
            "tick_count": self._tick_count,
            "phase": self._phase.value,
        }

    def __repr__(self) -> str:
        params_str = ", ".join(f"{k}={v}" for k, v in self._coefficients.as_dict().items())
        return f"{self.__class__.__name__}({self._method.label}, {params_str}, state={self._state})"


# =============================================================================
# CONSTRUÇÃO
# =============================================================================

def _is_real(value: Any) -> bool:
    """Escalar real (int/float/numpy), excluindo bool."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (Real, np.integer, np.floating))


def _as_real_sequence(value: Any) -> Optional[list]:
    """Converte lista/tupla/array 1-D de reais em lista de floats; None se não for."""
    if isinstance(value, np.ndarray):
        if value.ndim != 1 or not (
            np.issubdtype(value.dtype, np.floating) or np.issubdtype(value.dtype, np.integer)
        ):
            return None
        return [float(v) for v in value]

    if not isinstance(value, (list, tuple)):
        return None
    if not all(_is_real(v) for v in value):
        return None
    return [float(v) for v in value]


def _build_coefficients(method: Method, coefficients: Any) -> Optional[Coefficients]:
    if method is Method.EXPONENTIAL:
        if _is_real(coefficients):
            return ExponentialCoefficients(alpha=float(coefficients))
        return None

    if method is Method.DOUBLE_EXPONENTIAL:
        pair = _as_real_sequence(coefficients)
        if pair is not None and len(pair) == 2:
            return DoubleExponentialCoefficients(alpha=pair[0], beta=pair[1], trend=0.0)
        return None

    if method is Method.FILTER_FIR:
        taps = _as_real_sequence(coefficients)
        if taps:
            return FIRCoefficients(taps=np.array(taps, dtype=float))
        return None

    return None


def make_smoother(
    method: Union[Method, int],
    coefficients: Any,
    initial_state: float = math.nan,
) -> Optional[Smoother]:
    """
    Cria um Smoother validando o formato dos coeficientes.

    Args:
        method: Método (ou seu valor inteiro)
        coefficients: Formato por método:
            - EXPONENTIAL: um real (alpha)
            - DOUBLE_EXPONENTIAL: par de reais (alpha, beta)
            - FILTER_FIR: lista não vazia de reais (taps)
        initial_state: Estado inicial; NaN significa "não inicializado",
            e a primeira amostra semeia o estado.

    Returns:
        Smoother configurado, ou None se os coeficientes não tiverem o
        formato exigido pelo método. Nenhum outro parâmetro é validado
        (ex: alpha fora de [0, 1] é aceito).
    """
    try:
        if isinstance(method, (bool, np.bool_)):
            raise ValueError(method)
        method = Method(method)
    except ValueError:
        logger.warning("Método desconhecido: %r", method)
        return None

    built = _build_coefficients(method, coefficients)
    if built is None:
        logger.warning(
            "Coeficientes incompatíveis com o método %s: %r", method.label, coefficients
        )
        return None

    smoother = Smoother(method, built, float(initial_state))
    logger.debug("Smoother criado: %r", smoother)
    return smoother
