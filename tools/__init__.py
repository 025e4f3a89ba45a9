# =============================================================================
# tools/__init__.py
# =============================================================================
# The FastMCP layer.
#
# ARCHITECTURAL ROLE:
#   tools/ translates between MCP and core/.  It:
#     1. Registers each core/ handler under its protocol name
#     2. Declares input schemas (FastMCP validates arguments before a
#        handler runs)
#     3. Adapts MCP sampling to core's SamplingClient (tools/sampling.py)
#     4. Logs every call and response to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain business logic (that's in core/)
#   - They do NOT talk to an LLM provider (the client does, see agent/)
# =============================================================================
