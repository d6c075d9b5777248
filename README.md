# missionboard

A small interactive mission tracker for the terminal. Pick missions from a
board, push their progress forward, give them up, and collect experience
when they are done.

## Installing

    pip install .

## Playing

    missionboard

A menu is shown on every turn, and a number is read after the `> ` prompt:

    --- Missions Menu ---
    1. Start a mission;
    2. Show active missions' status;
    3. Give up a mission;
    4. Simulate missions completion;
    5. Show completed missions;
    6. Show current exp;
    7. Show project's info & credits
    8. Quit

Options 1 and 3 list the missions first and then ask for a mission number.
Input that does not start with a number is reported and the menu is shown
again. Choosing 8, or reaching the end of input, ends the session.
`missionboard --help` prints a short usage message.

Five missions come with the board:

| #  | Mission            | Goal | Reward  |
|----|--------------------|------|---------|
| 0  | Kill enemies       | 30   | 150 exp |
| 1  | Steal cars         | 15   | 200 exp |
| 2  | Take down thieves  | 20   | 300 exp |
| 3  | Collect items      | 75   | 75 exp  |
| 4  | Defeat boss        | 100  | 500 exp |

Each "simulate" step adds one point to every active mission. A mission
whose points reach its goal is completed and its reward goes to the player.
Giving up a mission resets its progress and puts it back on the board.

## Using it from Python

    from missionboard.missions import MissionsManager, Player, default_missions

    player = Player()
    board = MissionsManager(default_missions(), player)
    board.accept(1)
    for _ in range(15):
        board.simulate()
        print(board.evaluate(), end="")
    print(player.exp_points)     # 200
    print(board.completed_listing())

`MissionsManager` keeps three lists indexed by mission number —
`available`, `active` and `completed` — and each mission sits in exactly one
of them. Its methods are `accept`, `update`, `mark_completed`, `fail`,
`simulate` and `evaluate`; `available_listing`, `active_listing` and
`completed_listing` return the text shown by the menu. `evaluate` returns
the announcement text for the missions it completed.

Operations that cannot be carried out, such as accepting a mission that is
already active, listing an empty list, or an index off the board, raise
`MissionError` (a subclass of `ValueError`).

`missionboard.helpers` provides `project_info()` and `credits()`, which
return the text shown by menu option 7.

## What it does not do

Progress lives only in memory: nothing is saved between sessions, and each
run starts with the five built-in missions and zero experience.

## Running the tests

    pip install .[test]
    pytest