# =============================================================================
# agent/prompt.py  —  System prompt for sampling requests
# =============================================================================
#
# When the user-directory server asks the host to generate a random user,
# the request carries only the server's instruction.  The host adds this
# system prompt unless the server supplied its own, to keep the model from
# chatting around the JSON it was asked for.
# =============================================================================

SAMPLING_SYSTEM_PROMPT = """You are a test-data generator serving requests from a tool server.
Answer with exactly what the request asks for and nothing else: no greeting,
no explanation, no Markdown unless the request explicitly asks for it.
Invented people, emails, addresses and phone numbers must look realistic but
must not belong to real, identifiable individuals."""
