# =============================================================================
# core/user_resources.py  —  Resource logic: users://all, users://{id}/profile
# =============================================================================
#
# A resource read always answers with exactly one content item:
#
#   success  → application/json  (the collection, the record, or null)
#   failure  → text/plain         (a generic message, cause logged only)
#
# A lookup miss is NOT a failure.  "Looked up, absent" is JSON null;
# "could not look up" is the plain-text error.
# =============================================================================

import json
import logging
import re

from core.models import JSON_MIME_TYPE, TEXT_MIME_TYPE, ResourceContents
from core.user_store import UserStore

logger = logging.getLogger(__name__)

ALL_USERS_URI = "users://all"
USER_PROFILE_URI_TEMPLATE = "users://{userId}/profile"

# Optional sign and ASCII digits only: no "1_0", no non-ASCII digits.
_USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def user_profile_uri(user_id: int | str) -> str:
    return USER_PROFILE_URI_TEMPLATE.format(userId=user_id)


def parse_user_id(user_id: str | None) -> int | None:
    """Parse a path segment as a user id; anything non-numeric is None."""
    if user_id is None:
        return None
    user_id = user_id.strip()
    if not _USER_ID_PATTERN.fullmatch(user_id):
        return None
    return int(user_id)


async def list_users_resource(store: UserStore, uri: str = ALL_USERS_URI) -> list[ResourceContents]:
    try:
        users = await store.list_all()
    except Exception:
        logger.exception("Reading %s failed", uri)
        return [ResourceContents(uri, TEXT_MIME_TYPE, "Error retrieving users")]
    return [ResourceContents(uri, JSON_MIME_TYPE, json.dumps(users, ensure_ascii=False))]


async def user_profile_resource(
    store: UserStore, uri: str, user_id: str | None
) -> list[ResourceContents]:
    """Render one user's record as JSON, or null when no user has that id."""
    numeric_id = parse_user_id(user_id)
    try:
        if numeric_id is None:
            # Still a read: an unreadable store must not pass for "not found".
            await store.list_all()
            user = None
        else:
            user = await store.find_by_id(numeric_id)
    except Exception:
        logger.exception("Reading %s failed", uri)
        return [
            ResourceContents(
                uri,
                TEXT_MIME_TYPE,
                f"Error retrieving user detail of the id {user_id}",
            )
        ]
    return [ResourceContents(uri, JSON_MIME_TYPE, json.dumps(user, ensure_ascii=False))]
