# =============================================================================
# core/user_prompts.py  —  Prompt logic: create-fake-user
# =============================================================================
# Pure and synchronous.  The client gets the message back and runs it through
# its own LLM; nothing is stored here.
# =============================================================================

from core.models import PromptMessage


def create_fake_user_prompt(name: str) -> list[PromptMessage]:
    return [
        PromptMessage(
            role="user",
            text=(
                f"Create a fake user with the name {name}. The user should have "
                "given name and realistic other details"
            ),
        )
    ]
