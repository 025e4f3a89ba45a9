# =============================================================================
# tools/mcp_server.py  —  FastMCP Server (ALL tools, resources, prompts)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers the user directory's MCP surface.  Each registration is a thin
#   wrapper around a core/ function — it handles protocol shapes and logging,
#   nothing else.
#
#   Tools      create-user            store a user from explicit fields
#              create-random-user     ask the client's LLM for one, store it
#   Resources  users://all            every user, as a JSON array
#              users://{userId}/profile  one user as JSON (null if absent)
#   Prompts    create-fake-user       message template for a named fake user
#
# HOW IT WORKS (the flow):
#   1. The client calls a tool / reads a resource / gets a prompt by name
#   2. FastMCP validates the arguments against the function signature
#      (bad input never reaches core/ — the email check happens here)
#   3. The wrapper calls the core/ handler
#   4. The core/ handler returns a result object; failures are results too
#   5. The wrapper logs it and hands the text back to FastMCP
#
# The set of registrations is fixed: build_server() wires all of them at
# startup and nothing is added or removed afterwards.
#
# RUNNING THIS SERVER:
#   a) Standalone over stdio:   python -m tools.mcp_server
#   b) From the host client:    python main.py   (spawns (a) as a subprocess)
# =============================================================================

import dataclasses
import json
import logging
import sys
from contextvars import ContextVar
from typing import Annotated

from dotenv import load_dotenv

# Settings are read from the environment when this module is imported, so a
# .env file has to be loaded first.
load_dotenv()

from email_validator import validate_email
from fastmcp import Context, FastMCP
from fastmcp.prompts.prompt import Message
from fastmcp.server.middleware import Middleware, MiddlewareContext
from mcp.types import ToolAnnotations
from pydantic import AfterValidator, Field

from core.config import Settings, load_settings
from core.models import JSON_MIME_TYPE, ResourceContents, ToolResult
from core.user_prompts import create_fake_user_prompt
from core.user_resources import (
    ALL_USERS_URI,
    USER_PROFILE_URI_TEMPLATE,
    list_users_resource,
    user_profile_resource,
    user_profile_uri,
)
from core.user_store import JsonFileRepository, UserStore
from core.user_tools import create_random_user, create_user
from tools.sampling import ContextSampler

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT is the MCP transport, so every log line goes to STDERR.
#
#   CYAN    incoming calls (name + parameters)
#   GREEN   responses
#   YELLOW  intermediate status
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(name: str, result: ToolResult | list[ResourceContents]) -> str:
    """Log a handler result as compact JSON in GREEN and return its text."""
    if isinstance(result, ToolResult):
        payload = result.to_dict()
        text = result.text
    else:
        payload = {"contents": [item.to_dict() for item in result]}
        text = result[0].text
    logging.info(f"{_GREEN}  ← {name} response: {json.dumps(payload, separators=(',', ':'))}{_RESET}")
    return text


# =============================================================================
# Email input type
# =============================================================================
# The address has to be syntactically valid, but it is stored exactly as the
# caller wrote it.  pydantic's EmailStr would hand back the normalized form
# (lowercased domain), so the validator only checks and returns the input.
# =============================================================================
def _check_email_syntax(value: str) -> str:
    validate_email(value, check_deliverability=False)
    return value


EmailAddress = Annotated[
    str,
    AfterValidator(_check_email_syntax),
    Field(description="Email address (local-part@domain)"),
]


# =============================================================================
# Per-read resource media type
# =============================================================================
# FastMCP stamps each resource's declared mime_type on every read.  A failed
# read must go out as text/plain instead, so the resource wrappers record the
# media type the core chose and this middleware applies it to the response.
# =============================================================================
_read_mime_type: ContextVar[str | None] = ContextVar("read_mime_type", default=None)


def _resource_response(name: str, contents: list[ResourceContents]) -> str:
    _read_mime_type.set(contents[0].mime_type)
    return _log_response(name, contents)


class ResourceMimeTypeMiddleware(Middleware):
    async def on_read_resource(self, context: MiddlewareContext, call_next):
        token = _read_mime_type.set(None)
        try:
            contents = await call_next(context)
            mime_type = _read_mime_type.get()
        finally:
            _read_mime_type.reset(token)

        if mime_type is None:
            return contents
        return [dataclasses.replace(item, mime_type=mime_type) for item in contents]


def create_store(settings: Settings) -> UserStore:
    return UserStore(
        JsonFileRepository(settings.db_path),
        serialize_writes=settings.serialize_writes,
    )


def build_server(store: UserStore) -> FastMCP:
    """Create the FastMCP server with every tool, resource and prompt bound to `store`."""
    mcp = FastMCP("user-directory", middleware=[ResourceMimeTypeMiddleware()])

    # =========================================================================
    # TOOL: create-user
    # =========================================================================
    # EmailAddress puts the address-syntax check in the input validation, so
    # FastMCP rejects a bad email before the handler runs.
    # =========================================================================
    @mcp.tool(
        name="create-user",
        title="Create User",
        description="Creates a new user in the system",
    )
    async def create_user_tool(name: str, email: EmailAddress, address: str, phone: str) -> str:
        _log_request("create-user", name=name, email=email, address=address, phone=phone)
        result = await create_user(store, name, email, address, phone)
        return _log_response("create-user", result)

    # =========================================================================
    # TOOL: create-random-user
    # =========================================================================
    # The only tool that reaches outside the server: it asks the *client's*
    # LLM (MCP sampling) to invent a user.  Not idempotent — every call adds
    # a record.
    # =========================================================================
    @mcp.tool(
        name="create-random-user",
        title="Create Random User",
        description="Generates a random user with realistic details",
        annotations=ToolAnnotations(
            readOnlyHint=False,
            idempotentHint=False,
            openWorldHint=True,
            destructiveHint=False,
        ),
    )
    async def create_random_user_tool(ctx: Context) -> str:
        _log_request("create-random-user")
        _log_status("Requesting user data from the client LLM")
        result = await create_random_user(store, ContextSampler(ctx))
        return _log_response("create-random-user", result)

    # =========================================================================
    # RESOURCE: users://all
    # =========================================================================
    @mcp.resource(
        ALL_USERS_URI,
        name="users",
        title="Get all users",
        description="Retrieves all users from the system",
        mime_type=JSON_MIME_TYPE,
    )
    async def all_users() -> str:
        _log_request(ALL_USERS_URI)
        contents = await list_users_resource(store, ALL_USERS_URI)
        return _resource_response(ALL_USERS_URI, contents)

    # =========================================================================
    # RESOURCE TEMPLATE: users://{userId}/profile
    # =========================================================================
    # A template, not a resource: profiles are addressable by id but never
    # enumerated in resources/list.
    # =========================================================================
    @mcp.resource(
        USER_PROFILE_URI_TEMPLATE,
        name="user details",
        title="User Profile",
        description="User Profile Details",
        mime_type=JSON_MIME_TYPE,
    )
    async def user_profile(userId: str) -> str:
        uri = user_profile_uri(userId)
        _log_request(USER_PROFILE_URI_TEMPLATE, userId=userId)
        contents = await user_profile_resource(store, uri, userId)
        return _resource_response(uri, contents)

    # =========================================================================
    # PROMPT: create-fake-user
    # =========================================================================
    @mcp.prompt(
        name="create-fake-user",
        title="Create Fake User",
        description="Creates a fake user with a given name",
    )
    def create_fake_user(name: str) -> list:
        _log_request("create-fake-user", name=name)
        return [Message(m.text, role=m.role) for m in create_fake_user_prompt(name)]

    return mcp


# =============================================================================
# Module-level server, bound to the configured JSON file
# =============================================================================
mcp = build_server(create_store(settings))


if __name__ == "__main__":
    _log_status(f"Serving users from {settings.db_path}")
    mcp.run()
