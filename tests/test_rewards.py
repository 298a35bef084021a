import pytest

from intern_portal_api.app.services.rewards import REWARDS, next_reward, reward_progress


def test_demo_user_progress():
    progress = {item.name: item for item in reward_progress(15420)}

    assert [reward.name for reward in REWARDS] == [
        "Bronze Badge",
        "Silver Badge",
        "Gold Badge",
        "Platinum Badge",
        "Diamond Badge",
    ]
    assert progress["Gold Badge"].unlocked
    assert progress["Gold Badge"].progress == 100.0
    assert progress["Gold Badge"].remaining == 0
    assert not progress["Platinum Badge"].unlocked
    assert progress["Platinum Badge"].progress == 77.1
    assert progress["Platinum Badge"].remaining == 4580
    assert progress["Diamond Badge"].remaining == 34580


def test_threshold_is_inclusive():
    bronze = reward_progress(5000)[0]

    assert bronze.unlocked
    assert bronze.remaining == 0


def test_next_reward():
    assert next_reward(0).name == "Bronze Badge"
    assert next_reward(15420).name == "Platinum Badge"
    assert next_reward(50000) is None


def test_negative_donations_are_rejected():
    with pytest.raises(ValueError):
        reward_progress(-1)
