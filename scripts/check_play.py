#!/usr/bin/env python3
"""
出牌校验脚本

Usage:
    python scripts/check_play.py --hand "3S 3C 3D 3H 9H" --board "2H" --play "3S 3C 3D 3H"
    python scripts/check_play.py --hand "4S 4C 5S 5C 6S 6C" --board "3S 3C 4D 4H 5D 5H" --play "4S 4C 5S 5C 6S 6C"
"""
import argparse
import logging
import sys
from pathlib import Path

# 添加项目根目录到路径
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from tienlen.cards import str_to_cards, cards_to_str
from tienlen.rules import RuleEngine
from tienlen.validator import PlayValidator

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tien Len play checker")

    parser.add_argument("--hand", type=str, required=True, help="Cards in hand, e.g. \"3S 4C 10H\"")
    parser.add_argument("--play", type=str, required=True, help="Selected cards")
    parser.add_argument("--board", type=str, default="", help="Cards on the board (empty for a new round)")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        hand = str_to_cards(args.hand)
        play = str_to_cards(args.play)
        board = str_to_cards(args.board) if args.board else []
    except ValueError as e:
        logger.error(f"Bad card input: {e}")
        return 2

    combo = RuleEngine.identify_combination(play)
    logger.info(f"Hand:  {cards_to_str(hand)}")
    logger.info(f"Board: {cards_to_str(board) or '(new round)'}")
    logger.info(f"Play:  {cards_to_str(play)} -> {combo.type.name}")

    result = PlayValidator.validate_play(hand, play, board)
    if not result.is_valid:
        logger.info(f"Rejected: {result.reason.name}")
        return 1

    is_chop, chop_type = RuleEngine.try_detect_chop(board, play)
    if is_chop:
        logger.info(f"Valid - chop ({chop_type})")
    else:
        logger.info("Valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
