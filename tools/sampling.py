# =============================================================================
# tools/sampling.py  —  SamplingClient on top of MCP sampling
# =============================================================================
#
# MCP "sampling" lets a server borrow the client's LLM: the server sends a
# sampling/createMessage request and the client answers with a completion.
# FastMCP exposes that as Context.sample().  This adapter is the only place
# the core's SamplingClient contract meets FastMCP.
# =============================================================================

from fastmcp import Context

from core.errors import SamplingError


class ContextSampler:
    """SamplingClient backed by the current request's FastMCP Context."""

    def __init__(self, ctx: Context):
        self._ctx = ctx

    async def generate(self, instruction: str, max_tokens: int) -> str:
        # A plain string becomes one user-role text message.
        try:
            result = await self._ctx.sample(instruction, max_tokens=max_tokens)
        except Exception as e:
            raise SamplingError(f"sampling request failed: {e}") from e

        # Image/audio completions carry no text.
        return getattr(result, "text", None) or ""
