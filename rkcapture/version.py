"""Build identification for the capture program."""

VERSION = "dev"
COMMIT = "unknown"
BUILD_TIME = "unknown"


def version_text() -> str:
    """Return the version banner shown by ``--version``."""
    return "\n".join(
        (
            f"Version: {VERSION}",
            f"Git commit: {COMMIT}",
            f"Build: {BUILD_TIME}",
        )
    )