"""KanjiVG stroke-order diagrams.

KanjiVG names each file after the character's code point: lowercase hex,
zero-padded to five digits (漢 U+6F22 -> `06f22.svg`). The asset root is
either an http(s) base URL or a local directory holding those files.

Each fetch is a single read: no retries, no caching. A non-success read
raises `NotFoundError` with the attempted filename.
"""
from __future__ import annotations
import asyncio
import logging
from pathlib import Path
from typing import Optional

import requests

from ...core.config import StrokeOrderConfig, load_config
from ...core.errors import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)

SVG_EXTENSION = ".svg"


def resolve_asset_name(character: str, extension: str = SVG_EXTENSION) -> str:
    """Return the KanjiVG filename for the first code point of `character`."""
    if not isinstance(character, str) or not character:
        raise InvalidInputError(f'Invalid kanji: "{character}"')
    return f"{ord(character[0]):05x}{extension}"


def _is_url(root: str) -> bool:
    return root.startswith(("http://", "https://"))


class StrokeOrderLoader:
    """Reads stroke-order SVGs from one asset root."""

    def __init__(self, asset_root: str, extension: str = SVG_EXTENSION,
                 timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.asset_root = str(asset_root)
        self.extension = extension
        self.timeout = timeout
        self._http = session if session is not None else requests

    @classmethod
    def from_config(cls, cfg: Optional[StrokeOrderConfig] = None,
                    session: Optional[requests.Session] = None) -> "StrokeOrderLoader":
        cfg = cfg or load_config().strokes
        return cls(cfg.asset_root, extension=cfg.extension, timeout=cfg.timeout, session=session)

    def asset_name(self, character: str) -> str:
        return resolve_asset_name(character, self.extension)

    def location(self, filename: str) -> str:
        if _is_url(self.asset_root):
            return f"{self.asset_root.rstrip('/')}/{filename}"
        return str(Path(self.asset_root) / filename)

    def fetch(self, character: str) -> str:
        filename = self.asset_name(character)
        target = self.location(filename)
        if _is_url(self.asset_root):
            return self._read_url(filename, target)
        return self._read_file(filename, target)

    async def fetch_async(self, character: str) -> str:
        """Same single read as `fetch`, run off the event loop thread."""
        return await asyncio.to_thread(self.fetch, character)

    def _read_url(self, filename: str, url: str) -> str:
        logger.debug('Fetching stroke order %s', url)
        resp = self._http.get(url, timeout=self.timeout)
        if not resp.ok:
            logger.info('Stroke order %s unavailable (HTTP %s)', filename, resp.status_code)
            raise NotFoundError(f"SVG not found: {filename}", filename=filename, target=url)
        return resp.text

    def _read_file(self, filename: str, path: str) -> str:
        p = Path(path)
        if not p.is_file():
            logger.info('Stroke order %s not present at %s', filename, p)
            raise NotFoundError(f"SVG not found: {filename}", filename=filename, target=path)
        return p.read_text(encoding='utf-8')


def fetch_stroke_order(character: str, loader: Optional[StrokeOrderLoader] = None) -> str:
    loader = loader or StrokeOrderLoader.from_config()
    return loader.fetch(character)


async def fetch_stroke_order_async(character: str, loader: Optional[StrokeOrderLoader] = None) -> str:
    loader = loader or StrokeOrderLoader.from_config()
    return await loader.fetch_async(character)
