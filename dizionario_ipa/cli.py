"""Command-line interface for Dizionario IPA.

WHY: Teachers and learners want a quick way to transcribe a sentence
from the terminal, and scripts want a pipe-friendly converter. The CLI
wires the full pipeline behind one command.

HOW: Uses argparse to accept the text (positional, --file, or stdin),
an optional precomputed IPA string, and the output selection. Runs the
async engine via asyncio.run(). Status and diagnostics go to stderr;
results go to stdout.

RULES:
- Text sources, in priority order: positional TEXT, --file, stdin
- --ipa skips espeak-ng entirely; the given IPA is post-processed unless
  --no-raddoppiamento is set
- --format: ipa, plain_text, html or all (default: all, labeled sections)
- An engine failure ("[Error: ...]") exits with status 1
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from dizionario_ipa.config import configure_logging
from dizionario_ipa.core.raddoppiamento import find_gemination_events, post_process_italian_ipa
from dizionario_ipa.core.simplifier import build_segments
from dizionario_ipa.core.tokenizer import align_lines
from dizionario_ipa.engine.espeak import EspeakPhonemizer
from dizionario_ipa.formatters import RENDERERS

OUTPUT_CHOICES = ("ipa", "plain_text", "html", "all")

_LABELS = {
    "ipa": "IPA",
    "plain_text": "Simplified",
    "html": "HTML",
}


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def _explain(text: str, ipa: str) -> None:
    """Report every onset that raddoppiamento doubles in the raw IPA."""
    for line_no, (line, ipa_line) in enumerate(align_lines(text, ipa), start=1):
        events = find_gemination_events(line, ipa_line, on_diagnostic=_status)
        if not events:
            continue
        for event in events:
            _status("  line {}: {} {} → {} ({}, trigger '{}')".format(
                line_no, event.word, event.before, event.after, event.reason, event.trigger,
            ))


async def _resolve_ipa(args: argparse.Namespace, text: str) -> str:
    if args.ipa is not None:
        raw = args.ipa
    else:
        _status("Phonemizing with espeak-ng...")
        raw = await EspeakPhonemizer(post_process=False).phonemize(text)
        if raw.startswith("[Error:"):
            return raw

    if args.explain:
        _explain(text, raw)
    if args.raddoppiamento:
        return post_process_italian_ipa(text, raw, on_diagnostic=_status)
    return raw


def render_outputs(text: str, ipa: str, selected: str) -> List[str]:
    """Render the requested outputs as printable blocks."""
    keys = ["ipa", "plain_text", "html"] if selected == "all" else [selected]
    segments = build_segments(text, ipa, on_diagnostic=_status)
    blocks = []
    for key in keys:
        body = ipa if key == "ipa" else RENDERERS[key]().render(segments)
        if selected == "all":
            blocks.append("{}:\n{}".format(_LABELS[key], body))
        else:
            blocks.append(body)
    return blocks


async def _run(args: argparse.Namespace) -> int:
    try:
        text = _read_text(args).strip()
    except OSError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    if not text:
        _status("Nothing to transcribe.")
        return 0

    ipa = await _resolve_ipa(args, text)
    if ipa.startswith("[Error:"):
        print(ipa, file=sys.stderr)
        return 1

    print("\n\n".join(render_outputs(text, ipa, args.format)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="dizionario_ipa",
        description="Transcribe Italian text to IPA and produce a simplified "
                    "spelling that shows open vowels, voiced sibilants and "
                    "raddoppiamento fonosintattico.",
    )

    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Italian text to transcribe (default: read --file or stdin).",
    )

    parser.add_argument(
        "--file",
        default=None,
        help="Path to a UTF-8 text file to transcribe.",
    )

    parser.add_argument(
        "--ipa",
        default=None,
        help="Use this IPA instead of running espeak-ng (one token per word).",
    )

    parser.add_argument(
        "--format",
        choices=OUTPUT_CHOICES,
        default="all",
        help="Output to print (default: %(default)s).",
    )

    parser.add_argument(
        "--raddoppiamento",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Apply raddoppiamento fonosintattico to the IPA (default: %(default)s).",
    )

    parser.add_argument(
        "--explain",
        action="store_true",
        help="List every doubled onset and the word that triggered it on stderr.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable INFO logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging("INFO" if args.verbose else None)
    try:
        code = asyncio.run(_run(args))
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    sys.exit(code)


if __name__ == "__main__":
    main()
