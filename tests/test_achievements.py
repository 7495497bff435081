import pytest

from growbot.handlers.achievements import (
    ACHIEVEMENTS,
    AchievementAction,
    AchievementKind,
    UserAchievement,
    check_achievements,
    default_achievements,
)


def test_unlocked_progress_text():
    assert UserAchievement(key="mythical", progress=1, target=1, unlocked=True).progress_text() == "Unlocked"


def test_locked_progress_text():
    assert UserAchievement(key="traveler", progress=3, target=12).progress_text() == "3/12"


def test_default_achievements_follow_definitions():
    result = default_achievements()
    assert [(a.key, a.target) for a in result] == [(d.key, d.target) for d in ACHIEVEMENTS]


def test_default_achievements_have_no_progress():
    assert all(a.progress == 0 and not a.unlocked for a in default_achievements())


def test_achievement_keys_are_unique():
    keys = [a.key for a in default_achievements()]
    assert len(keys) == 10
    assert len(keys) == len(set(keys))


def test_first_grow_unlocks_first_bloom():
    assert check_achievements(AchievementAction(AchievementKind.FIRST_GROW)) == ["first_bloom"]


def test_reaching_hundred_unlocks_centenarian():
    assert check_achievements(AchievementAction.reach_height(100)) == ["centenarian"]


def test_below_hundred_unlocks_nothing():
    assert check_achievements(AchievementAction.reach_height(99)) == []


@pytest.mark.parametrize(
    "action",
    [
        AchievementAction(AchievementKind.SHOW_MERCY),
        AchievementAction(AchievementKind.WIN_AS_DUEL),
        AchievementAction(AchievementKind.WIN_SPROUT_OF_DAY),
        AchievementAction(AchievementKind.PARTICIPATE_IN_EVENT),
        AchievementAction.gift_item(42),
    ],
)
def test_other_actions_unlock_nothing(action):
    assert check_achievements(action) == []


def test_gift_item_keeps_recipient():
    action = AchievementAction.gift_item(42)
    assert action.kind is AchievementKind.GIFT_ITEM
    assert action.value == 42