"""
对局配置

定义发牌相关的参数
"""
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, Union
import json

from .cards import DECK_SIZE

MAX_PLAYERS = 4
CARDS_PER_PLAYER = 13


@dataclass
class GameConfig:
    """
    对局配置

    Attributes:
        num_players: 玩家人数 (最多 4 人)
        cards_per_player: 每人发牌数
        seed: 洗牌随机种子，None 表示不固定
    """
    num_players: int = MAX_PLAYERS
    cards_per_player: int = CARDS_PER_PLAYER
    seed: Optional[int] = None

    def __post_init__(self):
        if not 1 <= self.num_players <= MAX_PLAYERS:
            raise ValueError(f"num_players must be in 1..{MAX_PLAYERS}, got {self.num_players}")
        if self.cards_per_player <= 0:
            raise ValueError(f"cards_per_player must be positive, got {self.cards_per_player}")
        if self.num_players * self.cards_per_player > DECK_SIZE:
            raise ValueError(
                f"{self.num_players} players x {self.cards_per_player} cards "
                f"exceeds the {DECK_SIZE}-card deck"
            )

    @classmethod
    def from_dict(cls, d: dict) -> 'GameConfig':
        valid_keys = cls.__dataclass_fields__.keys()
        filtered = {k: v for k, v in d.items() if k in valid_keys}
        return cls(**filtered)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'GameConfig':
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> dict:
        return asdict(self)
