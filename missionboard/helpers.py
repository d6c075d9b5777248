"""Project information and credits."""

PROJECT_NAME = "Simple Mission System"
HOURS_TAKEN = "Approximately 6 hours"
STUDIO_NAME = "ThePracticeStudio"

DEV_NAMES = ("Kevin4e",)


def project_info() -> str:
    """Project name, time taken and studio, followed by a blank line."""
    return (
        f"Project name: {PROJECT_NAME}\n"
        f"Hours taken: {HOURS_TAKEN}\n"
        f"Made by: {STUDIO_NAME}\n"
        "\n"
    )


def credits() -> str:
    """The developer names, one per line, followed by a blank line."""
    return "Credits: \n" + "".join(f"{name}\n" for name in DEV_NAMES) + "\n"