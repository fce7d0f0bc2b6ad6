"""
Preset Loader - Carrega configurações de suavizadores por nome.

Permite referenciar presets por nome ao invés de repetir
método e coeficientes em cada configuração.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .settings import get_settings

logger = logging.getLogger(__name__)


SMOOTHING_CATEGORY = "smoothing"


def _presets_dir(presets_dir: Optional[Path] = None) -> Path:
    return Path(presets_dir) if presets_dir is not None else get_settings().presets_dir


def load_preset(
    category: str,
    preset_name: str,
    presets_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Carrega um preset de uma categoria específica.
    
    Args:
        category: Categoria do preset (smoothing)
        preset_name: Nome do preset (default, responsive, trend, etc.)
        presets_dir: Diretório raiz dos presets (default: Settings.presets_dir)
    
    Returns:
        Dicionário com a configuração do preset
    
    Raises:
        FileNotFoundError: Se o preset não existir
        ValueError: Se a categoria não existir
    """
    root = _presets_dir(presets_dir)
    category_dir = root / category
    
    if not category_dir.exists():
        available = list_categories(root)
        raise ValueError(f"Categoria '{category}' não existe. Disponíveis: {available}")
    
    preset_file = category_dir / f"{preset_name}.json"
    
    if not preset_file.exists():
        available = list_presets(category, root)
        raise FileNotFoundError(
            f"Preset '{preset_name}' não existe na categoria '{category}'. "
            f"Disponíveis: {available}"
        )
    
    with open(preset_file, "r", encoding="utf-8") as f:
        preset = json.load(f)
    
    logger.info(f"Preset carregado: {category}/{preset_name}")
    return preset


def list_presets(category: str, presets_dir: Optional[Path] = None) -> list[str]:
    """Lista todos os presets disponíveis em uma categoria."""
    category_dir = _presets_dir(presets_dir) / category
    
    if not category_dir.exists():
        return []
    
    return sorted(f.stem for f in category_dir.glob("*.json"))


def list_categories(presets_dir: Optional[Path] = None) -> list[str]:
    """Lista todas as categorias de presets disponíveis."""
    root = _presets_dir(presets_dir)
    if not root.exists():
        return []
    return sorted(d.name for d in root.iterdir() if d.is_dir())


def resolve_preset_reference(
    config: Any,
    category: str = SMOOTHING_CATEGORY,
    presets_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Normaliza a configuração de um suavizador para um dict com
    method/coefficients/initial_state.
    
    Formas aceitas:
        "trend"                                   -> preset completo
        {"preset": "trend", "initial_state": 2.0} -> preset com campos sobrescritos
        {"method": "fir", "coefficients": [...]}  -> inline, devolvido sem cópia
    
    Raises:
        FileNotFoundError: Se o preset referenciado não existir
        ValueError: Se a categoria não existir
    """
    if isinstance(config, str):
        return load_preset(category, config, presets_dir)
    
    if not isinstance(config, dict) or "preset" not in config:
        return config
    
    resolved = load_preset(category, config["preset"], presets_dir)
    # campos do chamador (ex: initial_state) prevalecem sobre o arquivo
    resolved.update((k, v) for k, v in config.items() if k != "preset")
    logger.debug("Preset %s/%s resolvido com campos %s", category, config["preset"], sorted(resolved))
    return resolved
