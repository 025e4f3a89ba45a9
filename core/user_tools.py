# =============================================================================
# core/user_tools.py  —  Tool logic: create-user, create-random-user
# =============================================================================
#
# Both tools follow the same life cycle:
#
#   Received → Validating ─┬─ Invalid ─────────────────────────→ error text
#                          └─ Valid → Persisting ─┬─ failure ──→ error text
#                                                 └─ persisted → success text
#
# Nothing leaves these functions by raising.  Every failure is logged to the
# operator channel (stderr) and answered with a short, generic ToolResult.
# The cause never reaches the caller.
# =============================================================================

import json
import logging

from core.errors import EmptyGeneration, SamplingError
from core.models import ToolResult
from core.sampling import SamplingClient
from core.user_codec import decode_generated_user, new_user_candidate
from core.user_store import UserStore

logger = logging.getLogger(__name__)

RANDOM_USER_INSTRUCTION = (
    "Generate fake user data. The user should have a realistic name, email, "
    "address, and phone number. Return this data as a JSON object with no "
    "other text or formatter so it can be used with JSON.parse."
)
RANDOM_USER_MAX_TOKENS = 1000

CREATE_USER_FAILED = "Error creating user"
GENERATION_FAILED = "Failed to generate user"
GENERATED_DATA_INVALID = "Failed to generate user data"


async def create_user(
    store: UserStore, name: str, email: str, address: str, phone: str
) -> ToolResult:
    """Store a user from explicit, schema-validated fields."""
    try:
        user_id = await store.append(new_user_candidate(name, email, address, phone))
    except Exception:
        logger.exception("create-user failed")
        return ToolResult(CREATE_USER_FAILED)
    return ToolResult(f"User created with ID: {user_id}")


async def _sample_user_text(sampler: SamplingClient) -> str:
    text = await sampler.generate(RANDOM_USER_INSTRUCTION, RANDOM_USER_MAX_TOKENS)
    if not text:
        raise EmptyGeneration("host LLM returned no text")
    return text


async def create_random_user(store: UserStore, sampler: SamplingClient) -> ToolResult:
    """Ask the host LLM for a fake user, decode it, and store it.

    Returns "Failed to generate user" when the LLM gives nothing back (the
    store is not touched), and "Failed to generate user data" when its answer
    cannot be decoded or stored.
    """
    try:
        text = await _sample_user_text(sampler)
    except (EmptyGeneration, SamplingError) as e:
        logger.warning("create-random-user: %s", e)
        return ToolResult(GENERATION_FAILED)

    try:
        random_user = decode_generated_user(text)
        logger.info("Random user data: %s", json.dumps(random_user))
        user_id = await store.append(random_user)
    except Exception:
        logger.exception("create-random-user could not use generated data")
        return ToolResult(GENERATED_DATA_INVALID)
    return ToolResult(f"Random user created with ID: {user_id}")
