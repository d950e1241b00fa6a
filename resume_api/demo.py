"""
Client demo.

Builds a Configuration, builds one or two request objects, awaits each
call in turn and prints the result. Errors are not handled: the first
failure propagates and ends the process with a traceback.

Usage:
    resume-demo
    resume-demo --with-response
    resume-demo --text "Ada Lovelace was ..." --base-url http://localhost:2024
"""

import argparse
import asyncio
import logging
from typing import Optional, Sequence

from resume_api.client import Configuration, default_api
from resume_api.schemas.functions import (
    ExtractResumeRequest,
    GetResponseRequest,
    Resume,
)

logger = logging.getLogger(__name__)

SAMPLE_RESUME = (
    "Tony Hoare is a British computer scientist who has made foundational "
    "contributions to programming languages, algorithms, operating systems, "
    "formal verification, and concurrent computing."
)
SAMPLE_SYSTEM_PROMPT = "You are a helpful assistant. Answer in one short paragraph."
SAMPLE_USER_PROMPT = "What is Tony Hoare best known for?"


async def run_extract_resume(
    configuration: Configuration,
    resume: str = SAMPLE_RESUME,
) -> Resume:
    """Call ExtractResume once and print the structured result."""
    request = ExtractResumeRequest(resume=resume)

    result = await default_api.extract_resume(configuration, request)

    print(result.model_dump_json(indent=2))
    return result


async def run_get_response(
    configuration: Configuration,
    system_prompt: str = SAMPLE_SYSTEM_PROMPT,
    user_prompt: str = SAMPLE_USER_PROMPT,
) -> str:
    """Call GetResponse once and print the text."""
    request = GetResponseRequest(system_prompt=system_prompt, user_prompt=user_prompt)

    result = await default_api.get_response(configuration, request)

    print(result)
    return result


async def run_demo(
    configuration: Configuration,
    *,
    resume: str = SAMPLE_RESUME,
    with_response: bool = False,
    system_prompt: str = SAMPLE_SYSTEM_PROMPT,
    user_prompt: str = SAMPLE_USER_PROMPT,
) -> None:
    """
    Single-call variant: ExtractResume only.
    Two-call variant (with_response=True): ExtractResume, then GetResponse.
    """
    await run_extract_resume(configuration, resume)
    if with_response:
        await run_get_response(configuration, system_prompt, user_prompt)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Call the Resume API and print the results."
    )
    parser.add_argument("--text", default=SAMPLE_RESUME, help="Resume text to extract")
    parser.add_argument(
        "--with-response",
        action="store_true",
        help="Also call GetResponse after ExtractResume",
    )
    parser.add_argument("--system-prompt", default=SAMPLE_SYSTEM_PROMPT)
    parser.add_argument("--user-prompt", default=SAMPLE_USER_PROMPT)
    parser.add_argument(
        "--base-url",
        default=None,
        help="Service URL (defaults to RESUME_API_BASE_URL)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    configuration = Configuration()
    if args.base_url:
        configuration.base_path = args.base_url

    asyncio.run(
        run_demo(
            configuration,
            resume=args.text,
            with_response=args.with_response,
            system_prompt=args.system_prompt,
            user_prompt=args.user_prompt,
        )
    )


if __name__ == "__main__":
    main()
