"""
Reader configuration loaded from gacode.yaml.

The YAML file ships next to this module and holds:
    defaults:   reader defaults (polflux sign convention)
    sentinel:   marker values of the "no data" container
    directives: directive ledger (phase, body layout, destination field)
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

CONFIG_FILE = 'gacode.yaml'

# Cache for the loaded configuration
_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def load_config() -> Dict[str, Any]:
    """
    Load reader configuration from gacode.yaml.

    Returns:
        Dict with 'defaults', 'sentinel' and 'directives' keys

    Raises:
        FileNotFoundError: If the packaged configuration file is missing
    """
    global _CONFIG_CACHE

    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    config_path = Path(__file__).parent / CONFIG_FILE
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}

    config.setdefault('defaults', {})
    config.setdefault('sentinel', {})
    config.setdefault('directives', {})

    _CONFIG_CACHE = config
    return config


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a reader default (e.g. 'negative_psi') from the configuration."""
    return load_config()['defaults'].get(key, fallback)


def get_sentinel() -> Dict[str, int]:
    """Marker values used by the sentinel container."""
    sentinel = load_config()['sentinel']
    return {
        'shot': int(sentinel.get('shot', -1)),
        'nexp': int(sentinel.get('nexp', 0)),
        'nion': int(sentinel.get('nion', 0)),
    }
