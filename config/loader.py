from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional

# Python 3.11 has tomllib; fall back to "tomli" on older versions if needed
try:
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

REPO = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = REPO / "config.toml"


def load_config(config_path: Path | None = None) -> Dict[str, Any]:
    """
    Load config.toml from repo root by default.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG

    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with config_path.open("rb") as f:
        return tomllib.load(f)


def tables_path_from(cfg: Dict[str, Any]) -> Optional[str]:
    """[display] tables_path, resolved against the repo root when relative."""
    raw = (cfg.get("display") or {}).get("tables_path")
    if not raw:
        return None
    p = Path(raw)
    if not p.is_absolute():
        p = REPO / p
    return str(p)


def log_level_from(cfg: Dict[str, Any], default: str = "INFO") -> str:
    return str((cfg.get("logging") or {}).get("level", default)).upper()
