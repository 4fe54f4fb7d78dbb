"""Player statistics shared across levels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["BonusType", "PlayerStatus", "bonus_to_string", "string_to_bonus", "START_LIVES"]

START_LIVES = 4


class BonusType(Enum):
    NO_BONUS = 0
    GROWUP_BONUS = 1
    FLOWER_BONUS = 2


_BONUS_NAMES = {
    BonusType.NO_BONUS: "none",
    BonusType.GROWUP_BONUS: "growup",
    BonusType.FLOWER_BONUS: "iceflower",
}
_BONUS_BY_NAME = {name: bonus for bonus, name in _BONUS_NAMES.items()}


@dataclass
class PlayerStatus:
    """Score, coins, lives and power-up of the player."""

    score: int = 0
    distros: int = 0
    lives: int = START_LIVES
    bonus: BonusType = BonusType.NO_BONUS
    score_multiplier: int = 1

    def reset(self) -> None:
        """Return every field to its starting value."""
        self.score = 0
        self.distros = 0
        self.lives = START_LIVES
        self.bonus = BonusType.NO_BONUS
        self.score_multiplier = 1


def bonus_to_string(bonus: BonusType) -> str:
    """Return the save-file name of ``bonus``."""
    return _BONUS_NAMES.get(bonus, "none")


def string_to_bonus(text: str) -> BonusType:
    """Return the bonus named ``text``; unknown names give ``NO_BONUS``."""
    return _BONUS_BY_NAME.get(text, BonusType.NO_BONUS)