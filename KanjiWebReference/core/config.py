"""Configuration schema.

Defaults point at the JSON bundled under `KanjiWebReference/data` and the
public KanjiVG repository. Environment variables override individual values.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DATA_ROOT = PACKAGE_ROOT / "data"
DEFAULT_KANJIVG_ROOT = "https://raw.githubusercontent.com/KanjiVG/kanjivg/master/kanji"


@dataclass
class PathsConfig:
    data_root: str = str(DEFAULT_DATA_ROOT)
    kanji_levels_dir: str = str(DEFAULT_DATA_ROOT / "levels")
    kanji_catalog_path: str = str(DEFAULT_DATA_ROOT / "kanji.json")


@dataclass
class StrokeOrderConfig:
    asset_root: str = DEFAULT_KANJIVG_ROOT  # base URL or local directory
    extension: str = ".svg"
    timeout: float = 10.0


@dataclass
class AppConfig:
    paths: PathsConfig = field(default_factory=PathsConfig)
    strokes: StrokeOrderConfig = field(default_factory=StrokeOrderConfig)


def load_config() -> AppConfig:
    """Build the default config and apply `KANJIWEB_*` environment overrides."""
    cfg = AppConfig()

    data_root = os.getenv("KANJIWEB_DATA_ROOT")
    if data_root:
        root = Path(data_root.strip())
        cfg.paths = PathsConfig(
            data_root=str(root),
            kanji_levels_dir=str(root / "levels"),
            kanji_catalog_path=str(root / "kanji.json"),
        )

    asset_root = os.getenv("KANJIWEB_KANJIVG_ROOT")
    if asset_root:
        cfg.strokes.asset_root = asset_root.strip()

    timeout = os.getenv("KANJIWEB_FETCH_TIMEOUT")
    if timeout:
        try:
            cfg.strokes.timeout = float(timeout)
        except ValueError:
            logger.warning("Ignoring KANJIWEB_FETCH_TIMEOUT=%r (not a number)", timeout)

    logger.debug("Loaded config: %s", cfg)
    return cfg
