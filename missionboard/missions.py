"""Missions, the player who earns their rewards, and the board that tracks them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional


class MissionError(ValueError):
    """Raised when a mission operation is not allowed in the current state."""


@dataclass
class Mission:
    """A mission with a points goal and an experience reward."""

    name: str
    goal_points: int
    exp_reward: int
    user_points: int = 0

    @property
    def is_complete(self) -> bool:
        return self.user_points == self.goal_points

    def describe(self) -> str:
        """Name and reward, one per line."""
        return f"Name: {self.name}\nReward: {self.exp_reward} exp \n"

    def describe_with_status(self) -> str:
        """Name, progress and reward, one per line."""
        return (
            f"Name: {self.name}\n"
            f"Status: {self.user_points}/{self.goal_points}\n"
            f"Reward: {self.exp_reward} exp \n"
        )


@dataclass
class Player:
    """The player and the experience earned so far."""

    exp_points: int = 0

    def reward(self, mission: Mission) -> None:
        """Add the mission's experience reward to the player's experience."""
        self.exp_points += mission.exp_reward


def default_missions() -> List[Mission]:
    """The built-in set of missions."""
    return [
        Mission("Kill enemies", 30, 150),
        Mission("Steal cars", 15, 200),
        Mission("Take down thieves", 20, 300),
        Mission("Collect items", 75, 75),
        Mission("Defeat boss", 100, 500),
    ]


Slots = List[Optional[Mission]]


class MissionsManager:
    """Tracks which missions are available, active and completed.

    Each mission keeps its index; at any time it sits in exactly one of the
    three slot lists.
    """

    def __init__(
        self,
        missions: Optional[Iterable[Mission]] = None,
        player: Optional[Player] = None,
    ) -> None:
        source = default_missions() if missions is None else missions
        self.missions: List[Mission] = [dataclasses.replace(m) for m in source]
        self.player = player if player is not None else Player()
        self.available: Slots = [dataclasses.replace(m) for m in self.missions]
        self.active: Slots = [None] * len(self.missions)
        self.completed: Slots = [None] * len(self.missions)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.missions):
            raise MissionError("Index out of range: invalid mission!")

    def _active_mission(self, index: int) -> Mission:
        self._check_index(index)
        mission = self.active[index]
        if mission is None:
            if self.available[index] is not None:
                raise MissionError(f"Error: Mission #{index} is not active!")
            raise MissionError(f"Error: Mission #{index} is completed!")
        return mission

    def accept(self, index: int) -> None:
        """Move the available mission at ``index`` to the active ones."""
        self._check_index(index)
        mission = self.available[index]
        if mission is None:
            if self.active[index] is not None:
                raise MissionError(f"Error: Mission #{index} is already active!")
            raise MissionError(f"Error: Mission #{index} is completed!")
        self.active[index] = mission
        self.available[index] = None

    def update(self, index: int) -> None:
        """Add one point of progress to the active mission at ``index``."""
        self._active_mission(index).user_points += 1

    def mark_completed(self, index: int) -> None:
        """Move the active mission at ``index`` to the completed ones."""
        mission = self._active_mission(index)
        self.completed[index] = mission
        self.active[index] = None

    def fail(self, index: int) -> None:
        """Give up the active mission at ``index``, resetting its progress."""
        mission = self._active_mission(index)
        mission.user_points = 0
        self.available[index] = mission
        self.active[index] = None

    @staticmethod
    def _listing(
        slots: Slots,
        header: str,
        empty_message: str,
        render: Callable[[Mission], str],
    ) -> str:
        entries = [(i, m) for i, m in enumerate(slots) if m is not None]
        if not entries:
            raise MissionError(empty_message)
        body = "".join(f"Mission #{i}\n{render(m)}\n" for i, m in entries)
        return f"{header}\n\n{body}"

    def available_listing(self) -> str:
        """Text listing the available missions."""
        return self._listing(
            self.available,
            "Available missions list: ",
            "No more available missions!",
            Mission.describe,
        )

    def active_listing(self) -> str:
        """Text listing the active missions with their progress."""
        return self._listing(
            self.active,
            "Active missions list: ",
            "No active missions yet!",
            Mission.describe_with_status,
        )

    def completed_listing(self) -> str:
        """Text listing the completed missions."""
        return self._listing(
            self.completed,
            "Completed missions list: ",
            "No completed missions yet!",
            Mission.describe,
        )

    def simulate(self) -> None:
        """Advance every active mission by one point."""
        indices = [i for i, m in enumerate(self.active) if m is not None]
        if not indices:
            raise MissionError("No active missions yet!")
        for index in indices:
            self.update(index)

    def evaluate(self) -> str:
        """Complete every active mission that reached its goal and reward it.

        Returns the announcement text for the missions completed.
        """
        messages = []
        for index, mission in enumerate(self.active):
            if mission is not None and mission.is_complete:
                messages.append(
                    f'Mission "{mission.name}" completed! \n'
                    f"Reward: +{mission.exp_reward} exp \n\n"
                )
                self.player.reward(mission)
                self.mark_completed(index)
        return "".join(messages)