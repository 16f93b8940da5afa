"""CLI interface for profanity-censor.

Usage:
    # Censor text (stdin: text, stdout: censored text)
    echo 'hello crap' | python -m profanity_censor.cli censor
    # -> hello c***

    # Analyze text (stdout: JSON with type, weights and matches)
    echo 'f u c k' | python -m profanity_censor.cli analyze

    # Exit status 1 if the text is inappropriate
    echo 'thanks!' | python -m profanity_censor.cli check

    # Censor OpenAI-format messages (stdin: JSON array)
    echo '[{"role":"user","content":"crap"}]' | \
        python -m profanity_censor.cli censor-messages

Options mirror CensorConfig; --config loads a YAML file first and the
command line options override it.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys

from .censor import Censor
from .config import create_censor, load_config, load_from_yaml
from .types import Analysis, InvalidOptionError, Type, parse_type

logger = logging.getLogger(__name__)


def _build_censor(args: argparse.Namespace) -> Censor:
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    if args.threshold is not None:
        cfg["censor_threshold"] = parse_type(args.threshold)
    if args.first_character_threshold is not None:
        cfg["censor_first_character_threshold"] = parse_type(args.first_character_threshold)
    if args.replacement is not None:
        cfg["censor_replacement"] = args.replacement
    if args.ignore_false_positives:
        cfg["ignore_false_positives"] = True
    if args.ignore_self_censoring:
        cfg["ignore_self_censoring"] = True
    return create_censor(cfg)


def _analysis_json(analysis: Analysis) -> dict:
    return {
        "type": int(analysis.type),
        "weights": dict(zip(
            ("profane", "offensive", "sexual", "mean", "evasive"),
            analysis.type.to_weights(),
        )),
        "description": analysis.describe(),
        "inappropriate": analysis.is_(Type.INAPPROPRIATE),
        "matches": [
            {
                "word": m.word,
                "start": m.start,
                "end": m.end,
                "type": int(m.type),
                "self_censored": m.self_censored,
            }
            for m in analysis.matches
        ],
    }


def cmd_censor(args: argparse.Namespace) -> int:
    """Censor plain text on stdin."""
    censor = _build_censor(args)
    sys.stdout.write(censor.censor_text(sys.stdin.read()))
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    """Analyze plain text on stdin, output JSON."""
    censor = _build_censor(args)
    text, analysis = censor.censor(sys.stdin.read())
    output = {"text": text, **_analysis_json(analysis)}
    json.dump(output, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Exit 1 if stdin is inappropriate."""
    censor = _build_censor(args)
    analysis = censor.analyze(sys.stdin.read())
    logger.info("analysis: %s", analysis.describe())
    return 1 if analysis.is_(Type.INAPPROPRIATE) else 0


def cmd_censor_messages(args: argparse.Namespace) -> int:
    """Censor OpenAI-format messages on stdin."""
    censor = _build_censor(args)
    messages = json.loads(sys.stdin.read())
    json.dump(censor.censor_messages(messages), sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="profanity_censor",
        description="Detect and censor profanity in text",
    )
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--threshold", default=None,
                        help='Censor threshold, e.g. "INAPPROPRIATE" or "PROFANE & SEVERE"')
    parser.add_argument("--first-character-threshold", default=None,
                        help="Threshold for also censoring the first character")
    parser.add_argument("--replacement", default=None, help="Replacement character")
    parser.add_argument("--ignore-false-positives", action="store_true",
                        help="Disable false-positive suppression")
    parser.add_argument("--ignore-self-censoring", action="store_true",
                        help="Do not read symbols as hidden letters")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("censor", help="Censor plain text (stdin)")
    sub.add_parser("analyze", help="Analyze plain text (stdin), JSON output")
    sub.add_parser("check", help="Exit 1 if text (stdin) is inappropriate")
    sub.add_parser("censor-messages", help="Censor OpenAI messages (JSON stdin)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "censor": cmd_censor,
        "analyze": cmd_analyze,
        "check": cmd_check,
        "censor-messages": cmd_censor_messages,
    }
    try:
        return cmds[args.command](args)
    except InvalidOptionError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())
