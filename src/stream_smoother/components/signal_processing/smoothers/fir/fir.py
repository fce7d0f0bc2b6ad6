"""
Filtro FIR (resposta finita ao impulso) em forma direta.

A saída é a combinação linear das últimas N entradas com os taps,
somada em sequência do tap 0 ao N-1:

    y_t = sum_i history[i] * taps[i]

O histórico começa zerado, então as primeiras N-1 saídas incluem
a cauda de zeros (transiente de partida do filtro).
"""

import numpy as np

from ..base import FIRCoefficients


def shift_history(history: np.ndarray, x: float) -> None:
    """Desloca o histórico uma posição (descarta a mais antiga) e insere `x` no índice 0."""
    if len(history) > 1:
        history[1:] = history[:-1]
    history[0] = x


def fir_next(coefficients: FIRCoefficients, x: float) -> float:
    """
    Processa uma amostra no filtro FIR.

    Não há caso especial para a primeira amostra.

    Args:
        coefficients: Taps e histórico (histórico é atualizado no lugar)
        x: Nova amostra

    Returns:
        Saída filtrada
    """
    shift_history(coefficients.history, x)

    # Acumula na ordem dos taps (mais recente primeiro)
    value = 0.0
    for sample, tap in zip(coefficients.history.tolist(), coefficients.taps.tolist()):
        value += sample * tap
    return value
