#!/usr/bin/env python3
"""
main.py

Точка входа: все решения треугольной доски из стандартного начала.

Использование:
    python main.py              # решения в stdout, по одному на строку
    python main.py --stats      # + статистика дерева в stderr
    python main.py -v           # + отладочный лог в stderr

Прочие аргументы игнорируются.
"""

import argparse
import logging
import sys
from typing import List, Optional

from core.board_state import BoardState
from solvers.tree import Tree
from utils.logging import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Triangular Peg Solitaire Solver (15 лунок)',
        allow_abbrev=False,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py            # все решения
  python main.py --stats    # со статистикой дерева
        """
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Отладочный лог в stderr'
    )
    parser.add_argument(
        '--stats', action='store_true',
        help='Статистика дерева в stderr'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args, _ = build_parser().parse_known_args(argv)

    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.DEBUG)

    tree = Tree(BoardState())
    sys.stdout.write(tree.winners_text())

    if args.stats:
        tree.get_height()
        print(f"📊 Статистика: {tree.stats}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
