"""
Módulo de Processamento de Sinais.

Contém componentes para suavização de sinais de sensores:

- smoothers/: Suavizadores em fluxo (exponencial, Holt, FIR)
"""

from . import smoothers
