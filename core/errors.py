# =============================================================================
# core/errors.py  —  Failure taxonomy for the user directory
# =============================================================================
#
# Every failure a handler can hit has a name here.  None of these ever reach
# the MCP transport: handlers catch them at their boundary and answer with a
# short, generic text instead (see core/user_tools.py, core/user_resources.py).
#
# NotFound is deliberately absent: a lookup miss is a valid empty result and
# is represented as None, rendered as JSON null.
#
# InvalidInput is absent too: bad tool arguments are rejected by FastMCP's
# pydantic schema check before any handler runs.
# =============================================================================


class UserDirectoryError(Exception):
    """Base class for user directory failures."""


class StorageError(UserDirectoryError):
    """The backing record collection could not be read or written."""


class InvalidGeneratedData(UserDirectoryError):
    """LLM output could not be turned into a user record."""

    def __init__(self, stage: str, message: str):
        super().__init__(f"{stage}: {message}")
        self.stage = stage


class EmptyGeneration(UserDirectoryError):
    """The host LLM returned no text content."""


class SamplingError(UserDirectoryError):
    """The sampling round trip itself failed (host refused, transport error)."""
