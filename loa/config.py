from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from loa.core import Piece
from loa.search import SearchConfig

logger = logging.getLogger(__name__)

PLAYER_KINDS = ("manual", "auto")


@dataclass
class GameConfig:
    black: str = "manual"
    white: str = "auto"
    seed: Optional[int] = None
    prompt: bool = True
    search: SearchConfig = field(default_factory=SearchConfig)

    def __post_init__(self) -> None:
        for side in ("black", "white"):
            kind = getattr(self, side)
            if kind not in PLAYER_KINDS:
                raise ValueError(f"{side} must be one of {PLAYER_KINDS}, got {kind!r}.")

    def player_kind(self, side: Piece) -> str:
        return self.black if side == Piece.BLACK else self.white


def _check_keys(section: str, raw: Dict[str, Any], allowed: set) -> None:
    unknown = sorted(set(raw) - allowed)
    if unknown:
        raise ValueError(f"Unknown {section} option(s): {', '.join(unknown)}.")


def config_from_dict(raw: Dict[str, Any]) -> GameConfig:
    raw = dict(raw)
    search_raw = raw.pop("search", None) or {}
    if not isinstance(search_raw, dict):
        raise ValueError("'search' must be a mapping.")
    _check_keys("game", raw, {f.name for f in fields(GameConfig)} - {"search"})
    _check_keys("search", search_raw, {f.name for f in fields(SearchConfig)})
    return GameConfig(search=SearchConfig(**search_raw), **raw)


def load_config(path: Union[str, Path]) -> GameConfig:
    """Read a YAML game configuration; a missing file gives the defaults."""
    cfg_path = Path(path)
    if not cfg_path.exists():
        logger.debug("Config %s not found, using defaults.", cfg_path)
        return GameConfig()
    raw = yaml.safe_load(cfg_path.read_text()) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config {cfg_path} must contain a mapping.")
    return config_from_dict(raw)
