"""Command-line entry point.

    python -m KanjiWebReference.main pages
    python -m KanjiWebReference.main dump kanji-levels
    python -m KanjiWebReference.main svg 漢 --fetch
    python -m KanjiWebReference.main check
    python -m KanjiWebReference.main stats
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from KanjiWebReference.core.config import load_config
from KanjiWebReference.core.errors import KanjiWebError
from KanjiWebReference.core.registry import PAGE_REGISTRY
from KanjiWebReference.services import pages  # noqa: F401  (registers pages)
from KanjiWebReference.services.data_prep.kanji_sources import compute_level_stats, load_level_sources
from KanjiWebReference.services.dictionary.kanji_levels import group_kanji_by_level
from KanjiWebReference.services.strokes import StrokeOrderLoader
from KanjiWebReference.tables.validate import validate_tables

logger = logging.getLogger(__name__)


def _print_json(obj) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Japanese writing-system reference data.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('pages', help='List registered page payloads')

    dump = sub.add_parser('dump', help='Print a page payload as JSON')
    dump.add_argument('page', help='Page name (see `pages`)')

    svg = sub.add_parser('svg', help='Resolve a stroke-order SVG filename')
    svg.add_argument('character')
    svg.add_argument('--fetch', action='store_true', help='Fetch and print the SVG contents')
    svg.add_argument('--root', default=None, help='Asset root (URL or directory); overrides config')

    check = sub.add_parser('check', help='Validate the static tables')
    check.add_argument('--max-errors', type=int, default=200)

    sub.add_parser('stats', help='Print per-level kanji counts')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')
    cfg = load_config()

    if args.command == 'pages':
        for name in PAGE_REGISTRY.names():
            print(name)
        return 0

    if args.command == 'dump':
        try:
            _print_json(PAGE_REGISTRY.load(args.page))
        except KeyError as e:
            logger.error('%s', e.args[0])
            return 2
        except (OSError, ValueError) as e:
            logger.error('Could not load page %s: %s', args.page, e)
            return 1
        return 0

    if args.command == 'svg':
        if args.root:
            cfg.strokes.asset_root = args.root
        loader = StrokeOrderLoader.from_config(cfg.strokes)
        try:
            filename = loader.asset_name(args.character)
            if not args.fetch:
                print(filename)
                return 0
            print(loader.fetch(args.character))
        except KanjiWebError as e:
            logger.error('%s', e)
            return 1
        return 0

    if args.command == 'check':
        problems = validate_tables(max_errors=args.max_errors)
        _print_json({'ok': not problems, 'problems': problems})
        return 1 if problems else 0

    if args.command == 'stats':
        groups = group_kanji_by_level(load_level_sources(cfg.paths.kanji_levels_dir))
        _print_json(compute_level_stats(groups))
        return 0

    return 2


if __name__ == '__main__':
    sys.exit(main())
