import pytest

from tuxjump.scene import (
    START_LIVES,
    BonusType,
    PlayerStatus,
    bonus_to_string,
    string_to_bonus,
)


def test_default_status():
    status = PlayerStatus()
    assert status.score == 0
    assert status.distros == 0
    assert status.lives == START_LIVES
    assert status.bonus is BonusType.NO_BONUS
    assert status.score_multiplier == 1


def test_reset_restores_defaults():
    status = PlayerStatus()
    status.score = 500
    status.distros = 42
    status.lives = 1
    status.bonus = BonusType.FLOWER_BONUS
    status.score_multiplier = 7
    status.reset()
    assert status == PlayerStatus()


@pytest.mark.parametrize(
    "bonus, name",
    [
        (BonusType.NO_BONUS, "none"),
        (BonusType.GROWUP_BONUS, "growup"),
        (BonusType.FLOWER_BONUS, "iceflower"),
    ],
)
def test_bonus_names(bonus, name):
    assert bonus_to_string(bonus) == name
    assert string_to_bonus(name) is bonus


@pytest.mark.parametrize("bonus", list(BonusType))
def test_bonus_round_trip(bonus):
    assert string_to_bonus(bonus_to_string(bonus)) is bonus


@pytest.mark.parametrize("text", ["", "fireflower", "GROWUP"])
def test_unknown_name_gives_no_bonus(text):
    assert string_to_bonus(text) is BonusType.NO_BONUS