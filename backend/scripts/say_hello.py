"""
Ask a text-generation provider for a short hello and print the result as JSON.

Usage (from backend directory):
  python -m scripts.say_hello
  python -m scripts.say_hello --provider groq

Credentials come from GOOGLE_API_KEY, GROQ_API_KEY and OPENAI_API_KEY.
LLM_PROVIDER (or --provider) forces one provider; without it the first
credentialed provider that answers is used (gemini, then groq, then openai).
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from hello_llm.core.logging import get_logger
from hello_llm.services import get_hello_service

logger = get_logger()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "--provider",
        default=None,
        help="Force a provider (openai, gemini, groq); overrides LLM_PROVIDER",
    )
    return parser.parse_args(argv)


async def run(provider: Optional[str] = None) -> str:
    """Run one hello and return it serialized as JSON."""
    service = get_hello_service()
    output = await service.say_hello(forced=provider)
    return output.model_dump_json()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        print(asyncio.run(run(args.provider)))
    except Exception as e:
        logger.error("Hello failed: %s", str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
