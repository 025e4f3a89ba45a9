# =============================================================================
# core/sampling.py  —  What the core needs from the host LLM
# =============================================================================
#
# The core never talks to an LLM directly.  It asks a SamplingClient, which
# the tools/ layer implements on top of MCP sampling (the server asks the
# *client's* LLM to generate text).  Tests plug in a scripted fake.
#
# Contract:
#   - one single-turn request, one user-role text message, capped at
#     max_tokens of output;
#   - returns the completion text, or "" when the host produced no text;
#   - raises SamplingError if the round trip itself fails.
# =============================================================================

from typing import Protocol


class SamplingClient(Protocol):
    async def generate(self, instruction: str, max_tokens: int) -> str: ...
