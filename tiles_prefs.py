"""Persisted user preferences (mute flag)"""
import json
import logging
from pathlib import Path
from typing import Optional
from tiles_config import CONFIG

logger = logging.getLogger(__name__)

DEFAULTS = {"muted": False}


def prefs_path() -> Path:
    p = CONFIG["PREFS_PATH"]
    return Path(p) if p else Path.home() / ".hitting_tiles" / "prefs.json"


def load_prefs(path: Optional[Path] = None) -> dict:
    path = path or prefs_path()
    prefs = dict(DEFAULTS)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return prefs
    except (OSError, ValueError) as e:
        logger.warning("could not read preferences from %s: %s", path, e)
        return prefs
    if isinstance(data, dict):
        prefs["muted"] = bool(data.get("muted", False))
    return prefs


def save_prefs(prefs: dict, path: Optional[Path] = None) -> bool:
    path = path or prefs_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"muted": bool(prefs.get("muted"))}), encoding="utf-8")
    except OSError as e:
        logger.warning("could not save preferences to %s: %s", path, e)
        return False
    return True
