# =============================================================================
# core/user_codec.py  —  Turning untrusted input into user records
# =============================================================================
#
# EXPLICIT FIELDS (create-user):
#   By the time a handler runs, FastMCP has already checked the four fields
#   against the tool's input schema (email included).  new_user_candidate()
#   just passes them through in storage order.
#
# LLM TEXT (create-random-user):
#   The model is asked for a bare JSON object but often wraps it in a
#   ```json fence anyway.  Decoding is a three-stage pipeline, each stage
#   with its own named failure so it can be tested on its own:
#
#     normalize_generated_text   raw text  → JSON text (fence stripped)
#     parse_generated_json       JSON text → Python value
#     check_generated_user       value     → user candidate (must be an object)
#
#   Missing fields are NOT an error: the object goes to the store as-is.
#   Garbage in, garbage out.
# =============================================================================

import json
import logging
from typing import Any

from core.errors import InvalidGeneratedData
from core.models import USER_FIELDS, NewUser

logger = logging.getLogger(__name__)

_FENCE_OPEN = "```json"
_FENCE_CLOSE = "```"


def new_user_candidate(name: str, email: str, address: str, phone: str) -> dict[str, str]:
    return NewUser(name=name, email=email, address=address, phone=phone).to_candidate()


def normalize_generated_text(text: str) -> str:
    """Trim, drop a leading ```json and a trailing ``` marker, trim again.

    Markers are only removed where they sit: a "```json" that is not at the
    very start (after trimming) is left alone, and so is a "```" that is not
    at the very end.  Matching is case-sensitive.
    """
    text = text.strip()
    if text.startswith(_FENCE_OPEN):
        text = text[len(_FENCE_OPEN):]
    if text.endswith(_FENCE_CLOSE):
        text = text[: -len(_FENCE_CLOSE)]
    return text.strip()


def parse_generated_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidGeneratedData("parse", f"not valid JSON ({e.msg})") from e


def check_generated_user(value: Any) -> dict[str, Any]:
    """Accept any JSON object as a user candidate.

    Only the outer shape is enforced.  Absent fields are logged and tolerated.
    """
    if not isinstance(value, dict):
        raise InvalidGeneratedData(
            "shape", f"expected a JSON object, got {type(value).__name__}"
        )
    missing = [name for name in USER_FIELDS if name not in value]
    if missing:
        logger.warning("Generated user is missing fields: %s", ", ".join(missing))
    return value


def decode_generated_user(text: str) -> dict[str, Any]:
    """Run the full normalize → parse → shape-check pipeline."""
    return check_generated_user(parse_generated_json(normalize_generated_text(text)))
