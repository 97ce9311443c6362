"""Stroke-order diagram lookup (KanjiVG filenames and fetching)."""
from .stroke_order import (
    StrokeOrderLoader,
    fetch_stroke_order,
    fetch_stroke_order_async,
    resolve_asset_name,
)

__all__ = ["StrokeOrderLoader", "fetch_stroke_order", "fetch_stroke_order_async", "resolve_asset_name"]
