#!/usr/bin/env python3
"""
发牌脚本

Usage:
    python scripts/deal.py --seed 42
    python scripts/deal.py --config configs/table.json
"""
import argparse
import logging
import sys
from pathlib import Path

# 添加项目根目录到路径
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from tienlen.cards import cards_to_str
from tienlen.config import GameConfig
from tienlen.deck import deal, smallest_card
from tienlen.profile import profile_hand

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tien Len dealer")

    parser.add_argument("--config", type=str, help="JSON config file")
    parser.add_argument("--seed", type=int, help="Shuffle seed")
    parser.add_argument("--players", type=int, help="Number of players")

    return parser.parse_args(argv)


def build_config(args) -> GameConfig:
    """命令行参数覆盖配置文件"""
    data = GameConfig.from_json(args.config).to_dict() if args.config else {}
    if args.seed is not None:
        data["seed"] = args.seed
    if args.players is not None:
        data["num_players"] = args.players
    return GameConfig.from_dict(data)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        logger.error(f"Bad config: {e}")
        return 2

    hands = deal(config)
    lowest = min((smallest_card(h) for h in hands), key=lambda c: c.power)

    logger.info("=" * 60)
    for seat, hand in enumerate(hands):
        profile = profile_hand(hand)
        marker = "*" if lowest in hand else " "
        logger.info(f"{marker}Seat {seat}: {cards_to_str(hand)}")
        logger.info(
            f"  pines {profile.pines}  straights {profile.straights}  "
            f"quads {profile.quads}  triples {profile.triples}  "
            f"pairs {profile.pairs}  singles {profile.singles}  twos {profile.twos}"
        )
    logger.info("=" * 60)
    logger.info(f"Lowest card {lowest} (*) leads")
    return 0


if __name__ == "__main__":
    sys.exit(main())
