# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Two families of dataclasses live here:
#
#   1. DIRECTORY DATA: NewUser is a candidate record before the store assigns
#      it an id.  Stored users are plain JSON objects (dicts), not dataclasses,
#      because generated records are kept exactly as the LLM produced them —
#      including records that are missing fields.
#
#   2. PROTOCOL RESULTS: ToolResult, ResourceContents and PromptMessage are the
#      shapes every handler returns.  Each has a to_dict() that produces the
#      MCP wire shape, so handlers can be tested without a running server.
# =============================================================================

from dataclasses import dataclass
from typing import Any

# A stored user: {"id": int, "name": ..., "email": ..., "address": ..., "phone": ...}
UserRecord = dict[str, Any]

USER_FIELDS = ("name", "email", "address", "phone")

JSON_MIME_TYPE = "application/json"
TEXT_MIME_TYPE = "text/plain"


# -----------------------------------------------------------------------------
# NewUser — a user the caller wants to create (no id yet)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class NewUser:
    """A user candidate whose fields have already passed schema validation."""

    name: str
    email: str
    address: str
    phone: str

    def to_candidate(self) -> dict[str, str]:
        # Field order is the on-disk order after "id".
        return {
            "name": self.name,
            "email": self.email,
            "address": self.address,
            "phone": self.phone,
        }


# -----------------------------------------------------------------------------
# Protocol-shaped results
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolResult:
    """Text returned by a tool call.  Failures are ToolResults too."""

    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"content": [{"type": "text", "text": self.text}]}


@dataclass(frozen=True)
class ResourceContents:
    """One content item of a resource read."""

    uri: str
    mime_type: str
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"uri": self.uri, "mimeType": self.mime_type, "text": self.text}


@dataclass(frozen=True)
class PromptMessage:
    role: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "content": {"type": "text", "text": self.text}}
