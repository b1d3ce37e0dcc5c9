import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from gedcom2dot.core.exceptions import ConfigurationError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom2dot.yml"


class G2DConfig:
    def __init__(self, data: Dict[str, Any]):
        self.logging = data.get("logging") or {}
        self.dot = data.get("dot") or {}
        self.labels = data.get("labels") or {}
        self.debug = bool(data.get("debug", False))
        self.source: Optional[Path] = None


def load_config(path: Union[str, Path, None] = None) -> G2DConfig:
    """
    Read the YAML config.

    An explicit ``path`` must exist; when the default file is absent the
    built-in defaults apply.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH

    if not config_path.exists():
        if path is not None:
            raise ConfigurationError(f"Config file not found: {config_path}")
        return G2DConfig({})

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid config file {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    cfg = G2DConfig(data)
    cfg.source = config_path
    return cfg


_config_cache: Optional[G2DConfig] = None


def get_config(path: Union[str, Path, None] = None) -> G2DConfig:
    global _config_cache
    if path is not None:
        _config_cache = load_config(path)
    elif _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
