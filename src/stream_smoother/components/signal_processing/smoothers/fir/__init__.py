"""
Filtro FIR.

Convolução com taps fixos sobre as últimas N entradas.
"""

from .fir import fir_next, shift_history

__all__ = ["fir_next", "shift_history"]
