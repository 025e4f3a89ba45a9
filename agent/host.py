# =============================================================================
# agent/host.py  —  The LLM-hosting side of the conversation
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds an MCP client that
#     1. launches the user-directory server as a subprocess (stdio transport)
#     2. answers the server's sampling requests with a real LLM
#
#   Sampling runs "backwards": the SERVER asks the CLIENT for a completion.
#   create-random-user depends on it, so a client without a sampling handler
#   can use every feature except that one.
#
# LLM USED:
#   Any LiteLLM model string (default "openrouter/openai/gpt-4o", set via
#   USER_DIRECTORY_SAMPLING_MODEL).  LiteLLM reads the provider key
#   (e.g. OPENROUTER_API_KEY) from the environment.
#
#     server ──sampling/createMessage──▶ client ──litellm──▶ provider
#            ◀────────── completion text ────────────────────
# =============================================================================

import logging
import os
import sys

import litellm
from fastmcp import Client
from fastmcp.client.transports import StdioTransport

from agent.prompt import SAMPLING_SYSTEM_PROMPT
from core.config import PROJECT_ROOT, Settings

logger = logging.getLogger(__name__)


def _message_text(message) -> str:
    return getattr(message.content, "text", None) or ""


def create_sampling_handler(model: str):
    """Return a FastMCP sampling handler that forwards requests to `model`."""

    async def sampling_handler(messages, params, context) -> str:
        chat = [{"role": "system", "content": params.systemPrompt or SAMPLING_SYSTEM_PROMPT}]
        chat.extend({"role": m.role, "content": _message_text(m)} for m in messages)

        logger.info("Sampling %d message(s) with %s (max_tokens=%s)", len(messages), model, params.maxTokens)
        response = await litellm.acompletion(
            model=model,
            messages=chat,
            max_tokens=params.maxTokens,
            temperature=params.temperature,
        )
        # An empty completion is passed through; the server decides what it means.
        return response.choices[0].message.content or ""

    return sampling_handler


def create_client(settings: Settings) -> Client:
    """Create a client that spawns `python -m tools.mcp_server` from the project root.

    The current environment is forwarded so the server sees the same
    USER_DIRECTORY_* settings as the host.
    """
    transport = StdioTransport(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
        env=dict(os.environ),
        cwd=str(PROJECT_ROOT),
    )
    return Client(transport, sampling_handler=create_sampling_handler(settings.sampling_model))
