"""
Suavização Exponencial.

Regras de atualização por amostra para os métodos exponenciais.
"""

from .exponential import exponential_next, double_exponential_next

__all__ = ["exponential_next", "double_exponential_next"]
