#!/usr/bin/env python3
"""
ExtractResume example.

Calls ExtractResume on the sample resume and prints the structured result.
Requires a running service (see demo_server.py).

Usage:
    python scripts/extract_resume.py
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
    await run_demo(config)


if __name__ == "__main__":
    asyncio.run(main())
