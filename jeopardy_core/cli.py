from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys
from typing import List, Optional

from .client import JeopardyClient
from .config import load_settings
from .controller import BoardController
from .errors import JeopardyError
from .view import ViewState


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(description='Jeopardy board in the terminal')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the category pick')
    parser.add_argument('--categories', type=int, default=settings.num_categories, help='Number of board columns')
    parser.add_argument('--pool-size', type=int, default=settings.pool_size, help='Candidate categories to draw from')
    parser.add_argument('--api-base', default=settings.api_base, help='Base URL of the category service')
    parser.add_argument('--timeout', type=float, default=settings.http_timeout, help='HTTP timeout in seconds')
    parser.add_argument('--sequential', action='store_true', help='Fetch categories one at a time')
    parser.add_argument('--play', action='store_true', help='Click cells interactively after the board loads')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    return parser


def _parse_cell(text: str) -> Optional[List[int]]:
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.split(sep) if t != '']
    if len(parts) != 2:
        return None
    try:
        return [int(parts[0]), int(parts[1])]
    except ValueError:
        return None


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    view = ViewState()
    controller = BoardController(
        JeopardyClient(args.api_base, timeout_s=args.timeout),
        view,
        num_categories=args.categories,
        pool_size=args.pool_size,
        rng=random.Random(args.seed),
        concurrent=not args.sequential,
    )

    def start() -> bool:
        try:
            asyncio.run(controller.start())
        except JeopardyError as e:
            print(f"error: {e}")
            return False
        print(view.pretty())
        return True

    if not start():
        return 1
    if not args.play:
        return 0

    while True:
        text = input("Cell as col,row (r = restart, q = quit): ").strip().lower()
        if text in ('q', 'quit'):
            return 0
        if text in ('r', 'restart'):
            start()
            continue
        cell = _parse_cell(text)
        if cell is None:
            print('Could not parse. Try again.')
            continue
        try:
            controller.click(cell[0], cell[1])
        except IndexError:
            print('No such cell. Try again.')
            continue
        print(view.pretty())


if __name__ == '__main__':
    sys.exit(main())
