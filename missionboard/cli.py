"""Interactive missions menu."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional, Sequence, TextIO

from .helpers import credits, project_info
from .missions import MissionError, MissionsManager

MENU = (
    "--- Missions Menu --- \n"
    "1. Start a mission; \n"
    "2. Show active missions' status; \n"
    "3. Give up a mission; \n"
    "4. Simulate missions completion; \n"
    "5. Show completed missions; \n"
    "6. Show current exp; \n"
    "7. Show project's info & credits \n"
    "8. Quit \n"
    "\n"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def read_int(prompt: str, stdin: TextIO, stdout: TextIO) -> Optional[int]:
    """Prompt for a number and read it from the next non-blank line.

    Returns None when the line does not start with an integer; the rest of
    the line is discarded either way. Raises EOFError at end of input.
    """
    stdout.write(prompt)
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError("end of input")
        if line.strip():
            break
    stdout.write("\n")
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


def _report(error: Exception, stdout: TextIO) -> None:
    stdout.write(f"{error}\n\n")


def _handle(option: int, manager: MissionsManager, stdin: TextIO,
            stdout: TextIO, stderr: TextIO) -> bool:
    """Carry out one menu option; return True when the user wants to quit."""
    if option == 1:
        try:
            stdout.write(manager.available_listing())
        except MissionError as error:
            _report(error, stdout)
            return False
        index = read_int("Which mission do you wish to accept? \n", stdin, stdout)
        if index is None:
            stderr.write("Invalid input: please enter a number. \n\n")
            return False
        try:
            manager.accept(index)
        except MissionError as error:
            _report(error, stdout)
            return False
        stdout.write("New mission activated! \n\n")
    elif option == 2:
        try:
            stdout.write(manager.active_listing())
        except MissionError as error:
            _report(error, stdout)
    elif option == 3:
        try:
            stdout.write(manager.active_listing())
        except MissionError as error:
            _report(error, stdout)
            return False
        index = read_int("Which missions do you wish to give up? \n", stdin, stdout)
        if index is None:
            stderr.write("Invalid input format! \n\n")
            return False
        try:
            manager.fail(index)
        except MissionError as error:
            _report(error, stdout)
            return False
        stdout.write("Mission given up. You can still carry it out again. \n\n")
    elif option == 4:
        try:
            manager.simulate()
        except MissionError as error:
            _report(error, stdout)
            return False
        stdout.write("Missions updated! \n\n")
        stdout.write(manager.evaluate())
    elif option == 5:
        try:
            stdout.write(manager.completed_listing())
        except MissionError as error:
            _report(error, stdout)
    elif option == 6:
        stdout.write(f"Current player's exp: {manager.player.exp_points}\n\n")
    elif option == 7:
        stdout.write(project_info())
        stdout.write(credits())
    elif option == 8:
        return True
    else:
        stderr.write("Invalid option! \n\n")
    return False


def run(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    """Run the menu loop until the user quits or input ends."""
    manager = MissionsManager()
    try:
        while True:
            stdout.write(MENU)
            option = read_int("> ", stdin, stdout)
            if option is None:
                stderr.write("Invalid input format! \n\n")
                continue
            if _handle(option, manager, stdin, stdout, stderr):
                break
    except EOFError:
        pass
    stdout.write("Goodbye! \n")
    stdout.write("Exiting... \n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point."""
    parser = argparse.ArgumentParser(
        prog="missionboard", description="Accept, progress and complete missions."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())