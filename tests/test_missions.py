import pytest

from missionboard.missions import (
    Mission,
    MissionError,
    MissionsManager,
    Player,
    default_missions,
)


def make_manager(goal=2, reward=10):
    return MissionsManager([Mission("a", goal, reward), Mission("b", 3, 20)], Player())


def test_default_missions_names():
    names = [m.name for m in default_missions()]
    assert names == [
        "Kill enemies",
        "Steal cars",
        "Take down thieves",
        "Collect items",
        "Defeat boss",
    ]
    assert all(m.user_points == 0 for m in default_missions())


def test_describe():
    assert Mission("x", 5, 7).describe() == "Name: x\nReward: 7 exp \n"


def test_describe_with_status():
    text = Mission("x", 5, 7, user_points=3).describe_with_status()
    assert text == "Name: x\nStatus: 3/5\nReward: 7 exp \n"


def test_player_reward():
    player = Player()
    player.reward(Mission("x", 1, 40))
    player.reward(Mission("y", 1, 2))
    assert player.exp_points == 42


def test_accept_moves_to_active():
    manager = make_manager()
    manager.accept(0)
    assert manager.available[0] is None
    assert manager.active[0].name == "a"


def test_accept_out_of_range():
    manager = make_manager()
    with pytest.raises(MissionError, match="Index out of range: invalid mission!"):
        manager.accept(2)
    with pytest.raises(MissionError, match="Index out of range"):
        manager.accept(-1)


def test_accept_twice():
    manager = make_manager()
    manager.accept(1)
    with pytest.raises(MissionError, match=r"Error: Mission #1 is already active!"):
        manager.accept(1)


def test_accept_completed():
    manager = make_manager(goal=1)
    manager.accept(0)
    manager.simulate()
    manager.evaluate()
    with pytest.raises(MissionError, match=r"Error: Mission #0 is completed!"):
        manager.accept(0)


def test_fail_resets_progress_and_makes_available():
    manager = make_manager(goal=5)
    manager.accept(0)
    manager.simulate()
    manager.simulate()
    manager.fail(0)
    assert manager.active[0] is None
    assert manager.available[0].user_points == 0


def test_fail_not_active():
    manager = make_manager()
    with pytest.raises(MissionError, match=r"Error: Mission #0 is not active!"):
        manager.fail(0)


def test_fail_completed():
    manager = make_manager(goal=1)
    manager.accept(0)
    manager.simulate()
    manager.evaluate()
    with pytest.raises(MissionError, match=r"is completed!"):
        manager.fail(0)


def test_fail_out_of_range():
    with pytest.raises(MissionError, match="Index out of range"):
        make_manager().fail(9)


def test_simulate_without_active():
    with pytest.raises(MissionError, match="No active missions yet!"):
        make_manager().simulate()


def test_simulate_only_touches_active():
    manager = make_manager()
    manager.accept(1)
    manager.simulate()
    assert manager.active[1].user_points == 1
    assert manager.available[0].user_points == 0


def test_evaluate_completes_and_rewards():
    manager = make_manager(goal=2, reward=10)
    manager.accept(0)
    manager.simulate()
    assert manager.evaluate() == ""
    manager.simulate()
    message = manager.evaluate()
    assert message == 'Mission "a" completed! \nReward: +10 exp \n\n'
    assert manager.player.exp_points == 10
    assert manager.active[0] is None
    assert manager.completed[0].name == "a"


def test_manager_copies_missions():
    missions = [Mission("a", 3, 1)]
    manager = MissionsManager(missions, Player())
    manager.accept(0)
    manager.update(0)
    assert missions[0].user_points == 0


def test_update_requires_active():
    with pytest.raises(MissionError, match="not active"):
        make_manager().update(0)


def test_listings_empty():
    manager = make_manager()
    with pytest.raises(MissionError, match="No active missions yet!"):
        manager.active_listing()
    with pytest.raises(MissionError, match="No completed missions yet!"):
        manager.completed_listing()
    manager.accept(0)
    manager.accept(1)
    with pytest.raises(MissionError, match="No more available missions!"):
        manager.available_listing()


def test_available_listing_format():
    manager = make_manager()
    manager.accept(0)
    listing = manager.available_listing()
    expected = "Available missions list: \n\nMission #1\n" + manager.available[1].describe() + "\n"
    assert listing == expected


def test_active_listing_uses_status():
    manager = make_manager()
    manager.accept(1)
    listing = manager.active_listing()
    assert listing.startswith("Active missions list: \n\n")
    assert manager.active[1].describe_with_status() in listing
    assert "Mission #0" not in listing


def test_completed_listing():
    manager = make_manager(goal=1)
    manager.accept(0)
    manager.simulate()
    manager.evaluate()
    listing = manager.completed_listing()
    assert listing == "Completed missions list: \n\nMission #0\n" + manager.completed[0].describe() + "\n"


def test_mark_completed():
    manager = make_manager()
    manager.accept(1)
    manager.mark_completed(1)
    assert manager.completed[1].name == "b"
    assert manager.active[1] is None