"""YellowBridge CLI: look up Chinese characters and words from the terminal.

Usage:
    python cli/main.py --help

Commands:
    headers    -> acquire a session and print the referer/cookie pair
    character  -> full aggregate for a single character
    word       -> aggregate for a word of any length
    extract    -> a single page type (stroke | etymology | details | examples | meaning)
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from yellowbridge import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import json
from typing import Any, Awaitable, Optional

import typer
from loguru import logger

from yellowbridge import (
    YbHeaders,
    YellowBridgeError,
    get_character_aggregate,
    get_character_details,
    get_character_etymology,
    get_word_aggregate,
    get_word_examples,
    get_word_meaning,
    get_word_stroke_info,
    get_yellowbridge_headers,
)
from yellowbridge.config import settings

app = typer.Typer(
    name="yellowbridge",
    help="YellowBridge Chinese dictionary lookups.",
    no_args_is_help=True,
)

_EXTRACTORS = {
    "stroke": get_word_stroke_info,
    "etymology": get_character_etymology,
    "details": get_character_details,
    "examples": get_word_examples,
    "meaning": get_word_meaning,
}

_COOKIE_OPTION = typer.Option(
    None, "--cookie", help="Reuse an existing session cookie (name=value)."
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr."),
) -> None:
    """YellowBridge Chinese dictionary lookups."""
    if verbose:
        logger.enable("yellowbridge")


def _headers_from(cookie: Optional[str]) -> Optional[YbHeaders]:
    if not cookie:
        return None
    return YbHeaders(referer=settings.landing_url, cookie=cookie)


def _run(coro: Awaitable[Any]) -> Any:
    """Run *coro* to completion, turning client errors into exit code 1."""
    try:
        return asyncio.run(coro)  # type: ignore[arg-type]
    except YellowBridgeError as exc:
        typer.echo(f"[yellowbridge] Error: {exc.message}")
        raise typer.Exit(1)


def _print_json(record: Any) -> None:
    typer.echo(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))


@app.command("headers")
def headers_cmd() -> None:
    """Acquire a session and print the headers to reuse with --cookie."""
    headers = _run(get_yellowbridge_headers())
    typer.echo(f"Referer: {headers.referer}")
    typer.echo(f"Cookie: {headers.cookie}")


@app.command("character")
def character_cmd(
    character: str = typer.Argument(..., help="A single Chinese character."),
    cookie: Optional[str] = _COOKIE_OPTION,
) -> None:
    """Print every record for a single character as JSON."""
    if len(character) != 1:
        typer.echo(f"[character] Expected a single character, got {character!r}.")
        raise typer.Exit(1)
    _print_json(_run(get_character_aggregate(character, _headers_from(cookie))))


@app.command("word")
def word_cmd(
    word: str = typer.Argument(..., help="A Chinese word (one or more characters)."),
    cookie: Optional[str] = _COOKIE_OPTION,
) -> None:
    """Print stroke info, examples and meaning for a word as JSON."""
    _print_json(_run(get_word_aggregate(word, _headers_from(cookie))))


@app.command("extract")
def extract_cmd(
    kind: str = typer.Argument(..., help="stroke | etymology | details | examples | meaning"),
    text: str = typer.Argument(..., help="Character or word to look up."),
    cookie: Optional[str] = _COOKIE_OPTION,
) -> None:
    """Print a single page type as JSON."""
    extractor = _EXTRACTORS.get(kind)
    if extractor is None:
        typer.echo(
            f"[extract] Unknown kind {kind!r}. Use: {' | '.join(_EXTRACTORS)}"
        )
        raise typer.Exit(1)
    _print_json(_run(extractor(text, _headers_from(cookie))))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
