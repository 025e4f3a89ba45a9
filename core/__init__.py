# =============================================================================
# core/__init__.py
# =============================================================================
# ALL business logic for the user directory: the store, the codec for
# untrusted input, and the tool/resource/prompt handlers.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, LiteLLM or any protocol
#   framework.  Handlers return plain result objects (core/models.py) and
#   reach the LLM only through the SamplingClient protocol, so every path
#   can be tested with a fake sampler and an in-memory repository.
# =============================================================================
