# =============================================================================
# agent/__init__.py
# =============================================================================
# The host side: an MCP client that launches the user-directory server and
# lends it an LLM for sampling.
#
# ARCHITECTURAL ROLE:
#   - core/   business logic, no frameworks
#   - tools/  the MCP server wrapping core/
#   - agent/  the client that talks to tools/ and owns the LLM connection
#
# Nothing in core/ or tools/ imports from here.
# =============================================================================
