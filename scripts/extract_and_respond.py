#!/usr/bin/env python3
"""
ExtractResume + GetResponse example.

Calls ExtractResume, then GetResponse, one after the other, and prints both
results. Requires a running service (see demo_server.py).

Usage:
    python scripts/extract_and_respond.py
"""

import asyncio
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from resume_api.client import Configuration
from resume_api.demo import run_demo


async def main() -> None:
    config = Configuration()
    await run_demo(config, with_response=True)


if __name__ == "__main__":
    asyncio.run(main())
