"""
Regras de atualização exponenciais (simples e dupla/Holt).

Ref: https://en.wikipedia.org/wiki/Exponential_smoothing
"""

from ..base import DoubleExponentialCoefficients, ExponentialCoefficients


def exponential_next(
    coefficients: ExponentialCoefficients,
    state: float,
    x: float,
    fresh: bool,
) -> float:
    """
    Suavização exponencial simples.

        s_t = s_{t-1} + alpha * (x_t - s_{t-1})

    Na primeira amostra (fase FRESH) o estado recebe `x` diretamente,
    ignorando `alpha`. `alpha` fora de [0, 1] não é verificado.
    """
    if fresh:
        return x
    return state + coefficients.alpha * (x - state)


def double_exponential_next(
    coefficients: DoubleExponentialCoefficients,
    state: float,
    x: float,
    fresh: bool,
) -> float:
    """
    Suavização exponencial dupla (tendência linear de Holt).

        s_t = alpha * x_t + (1 - alpha) * (s_{t-1} + b_{t-1})
        b_t = beta * (s_t - s_{t-1}) + (1 - beta) * b_{t-1}

    Atualiza `coefficients.trend` no lugar e retorna o novo estado.
    """
    if fresh:
        coefficients.trend = 0.0
        return x

    alpha = coefficients.alpha
    beta = coefficients.beta
    trend = coefficients.trend

    previous_state = state
    state = alpha * x + (1 - alpha) * (previous_state + trend)
    coefficients.trend = beta * (state - previous_state) + (1 - beta) * trend
    return state
