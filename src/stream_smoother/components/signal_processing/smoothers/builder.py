"""
Construção de suavizadores a partir de configurações.

Aceita configurações inline, nomes de preset ou referências a
preset com overrides:

    build_smoother("trend")
    build_smoother({"preset": "default", "initial_state": 0.0})
    build_smoother({"method": "fir", "coefficients": [0.5, 0.5]})

Diferente de `make_smoother`, erros de configuração levantam
ValueError: aqui a entrada vem de arquivos/usuários.
"""

import math
from typing import Any, Dict, Sequence, Union

from ....infrastructure.config.preset_loader import SMOOTHING_CATEGORY, resolve_preset_reference
from ....infrastructure.config.schemas import SmootherConfig
from .base import Method
from .smoother import Smoother, make_smoother


def build_smoother(config: Union[SmootherConfig, Dict[str, Any], str]) -> Smoother:
    """
    Cria um Smoother a partir de uma configuração.

    Args:
        config: SmootherConfig, dict inline, nome de preset ou
                dict com "preset" + overrides

    Returns:
        Smoother configurado

    Raises:
        ValueError: Se o método for desconhecido ou os coeficientes
                    não tiverem o formato exigido
        FileNotFoundError: Se o preset referenciado não existir
    """
    if not isinstance(config, SmootherConfig):
        resolved = resolve_preset_reference(config, SMOOTHING_CATEGORY)
        if not isinstance(resolved, dict):
            raise ValueError(f"Configuração inválida: {config!r}")
        config = SmootherConfig(**resolved)

    try:
        method = Method.from_name(config.method)
    except KeyError as e:
        raise ValueError(str(e.args[0])) from e

    initial_state = math.nan if config.initial_state is None else config.initial_state
    smoother = make_smoother(method, config.coefficients, initial_state)
    if smoother is None:
        raise ValueError(
            f"Coeficientes incompatíveis com o método '{method.label}': {config.coefficients!r}"
        )
    return smoother


# Conveniência: construtores por método
def create_exponential_smoother(alpha: float, initial_state: float = math.nan) -> Smoother:
    """Cria suavizador exponencial simples."""
    return build_smoother(SmootherConfig(
        method=Method.EXPONENTIAL.label,
        coefficients=alpha,
        initial_state=None if math.isnan(initial_state) else initial_state,
    ))


def create_double_exponential_smoother(
    alpha: float,
    beta: float,
    initial_state: float = math.nan,
) -> Smoother:
    """Cria suavizador exponencial duplo (Holt)."""
    return build_smoother(SmootherConfig(
        method=Method.DOUBLE_EXPONENTIAL.label,
        coefficients=(alpha, beta),
        initial_state=None if math.isnan(initial_state) else initial_state,
    ))


def create_fir_smoother(taps: Sequence[float]) -> Smoother:
    """
    Cria filtro FIR.

    Args:
        taps: Coeficientes, aplicados da amostra mais recente para a mais antiga
    """
    return build_smoother(SmootherConfig(
        method=Method.FILTER_FIR.label,
        coefficients=list(taps),
    ))
