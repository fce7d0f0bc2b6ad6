"""
Schemas de configuração de suavizadores.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class SmootherConfig(BaseModel):
    """Configuração declarativa de um suavizador."""
    method: str = Field(..., description="Nome do método (exponential, double_exponential, fir)")
    coefficients: Any = Field(..., description="alpha | [alpha, beta] | lista de taps")
    initial_state: Optional[float] = Field(None, description="Estado inicial. None = não inicializado (NaN)")
    description: Optional[str] = Field(None, description="Descrição livre do preset")
