# =============================================================================
# main.py  —  Entry Point for the User Directory host client
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (provider API key, USER_DIRECTORY_* settings)
#   2. Spawns the MCP server (tools/mcp_server.py) over stdio
#   3. Reads commands from the terminal and turns them into MCP calls
#
# COMMANDS:
#   add            create-user (asks for name, email, address, phone)
#   random         create-random-user (the server samples our LLM)
#   list           read users://all
#   show <id>      read users://<id>/profile
#   prompt <name>  get the create-fake-user prompt
#   quit           exit
# =============================================================================

import asyncio
import logging
import sys

from dotenv import load_dotenv

# Load environment variables BEFORE reading settings.
load_dotenv()

from fastmcp.exceptions import ToolError

from agent.host import create_client
from core.config import load_settings
from core.user_resources import ALL_USERS_URI, user_profile_uri

HELP = "Commands: add | random | list | show <id> | prompt <name> | quit"


def _print_tool_result(result) -> None:
    for item in result.content:
        print(f"🤖 {getattr(item, 'text', item)}")


def _print_resource(contents) -> None:
    for item in contents:
        print(f"📄 [{item.mimeType}] {getattr(item, 'text', '')}")


async def run_host():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    print("=" * 70)
    print("  USER DIRECTORY")
    print(f"  Sampling model: {settings.sampling_model}")
    print("=" * 70)

    async with create_client(settings) as client:
        print("✅ Connected to the user-directory server.")
        print(HELP)

        while True:
            try:
                line = input("\n🧑 > ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\n👋 Goodbye!")
                break

            if not line:
                continue
            command, _, arg = line.partition(" ")
            command = command.lower()
            arg = arg.strip()

            if command in ("quit", "exit", "q"):
                print("👋 Goodbye!")
                break

            try:
                if command == "add":
                    fields = {key: input(f"   {key}: ").strip() for key in ("name", "email", "address", "phone")}
                    _print_tool_result(await client.call_tool("create-user", fields))
                elif command == "random":
                    print("🤖 Asking the LLM for a user...")
                    _print_tool_result(await client.call_tool("create-random-user", {}))
                elif command == "list":
                    _print_resource(await client.read_resource(ALL_USERS_URI))
                elif command == "show" and arg:
                    _print_resource(await client.read_resource(user_profile_uri(arg)))
                elif command == "prompt" and arg:
                    prompt = await client.get_prompt("create-fake-user", {"name": arg})
                    for message in prompt.messages:
                        print(f"💬 {message.role}: {getattr(message.content, 'text', '')}")
                else:
                    print(HELP)
            except ToolError as e:
                # Raised for input the server's schema rejected (e.g. a bad email).
                print(f"⚠️  Rejected: {e}")


if __name__ == "__main__":
    asyncio.run(run_host())
