from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

LINK_DEFAULTS_PATH = Path(__file__).resolve().parents[2] / "data" / "link_defaults.json"

DEFAULT_LINK_STYLE: Dict[str, object] = {
    "border": [0.0, 0.0, 1.0],
    "color": [0.0, 1.0, 1.0],
    "highlight": "I",
}


def load_link_defaults(path: Path | None = None) -> dict:
    """
    Visual defaults for links built from payloads. Missing keys are filled from
    DEFAULT_LINK_STYLE; an unreadable file falls back to it entirely.
    """
    target = Path(path) if path else LINK_DEFAULTS_PATH
    defaults = json.loads(json.dumps(DEFAULT_LINK_STYLE))
    if not target.exists():
        return defaults
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load link defaults %s: %s", target, exc)
        return defaults
    if not isinstance(data, dict):
        logger.warning("Ignoring link defaults %s: expected a JSON object", target)
        return defaults
    defaults.update({k: v for k, v in data.items() if k in DEFAULT_LINK_STYLE})
    return defaults


def save_link_defaults(data: dict, path: Path | None = None) -> Path:
    target = Path(path) if path else LINK_DEFAULTS_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    return target
