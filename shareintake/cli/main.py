from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List

from shareintake.config import IntakeConfig, load_config
from shareintake.core.errors import ShareEventFormatError, ShareSerializationError
from shareintake.core.events import ShareEvent
from shareintake.core.normalization import classify_action, share_event_to_payload
from shareintake.core.resolver import ContentReader, LocalContentResolver

log = logging.getLogger("shareintake.cli")


def _configure_logging(cfg: IntakeConfig) -> None:
    logging.basicConfig(
        level=cfg.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname).1s %(name)s: %(message)s",
    )


def _read_event(source: str) -> dict:
    """Read a share event JSON document from a path, or stdin for "-"."""

    if source == "-":
        return json.load(sys.stdin)
    with open(source, "r", encoding="utf-8") as f:
        return json.load(f)


def cmd_normalize(args: argparse.Namespace) -> int:
    """Normalize a share event captured as JSON.

    References in the event are resolved against the local filesystem.
    Prints the output contract, or null when the event carries no content.

    Security notes:
    - --with-data prints full file contents (base64). Avoid on sensitive files.

    """

    try:
        raw = _read_event(args.event)
    except OSError as e:
        print(f"error: cannot read event: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        print(f"error: event is not valid UTF-8 JSON: {e}", file=sys.stderr)
        return 2

    try:
        event = ShareEvent.from_mapping(raw)
    except ShareEventFormatError as e:
        print(f"error: invalid share event: {e}", file=sys.stderr)
        return 2

    include_data = bool(args.with_data) or args.cfg.include_data
    try:
        payload = share_event_to_payload(event, LocalContentResolver(), include_data=include_data)
    except ShareSerializationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    indent = None if args.compact else 2
    print(json.dumps(payload, indent=indent, sort_keys=True))
    return 0


def cmd_classify(args: argparse.Namespace) -> int:
    """Print the classified form of an action identifier."""
    print(classify_action(args.action))
    return 0


def cmd_read_data(args: argparse.Namespace) -> int:
    """Print the base64 payload of a local reference ("" when unreadable)."""
    reader = ContentReader(LocalContentResolver())
    print(reader.read_encoded(args.reference))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    p = argparse.ArgumentParser(prog="shareintake", description="Share event normalization CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    np = sub.add_parser("normalize", help="Normalize a share event JSON document")
    np.add_argument("event", help="Path to event JSON, or - for stdin")
    np.add_argument("--with-data", action="store_true", help="Load base64 data for every item")
    np.add_argument("--compact", action="store_true", help="Print JSON on a single line")
    np.set_defaults(func=cmd_normalize)

    cp = sub.add_parser("classify", help="Classify an action identifier")
    cp.add_argument("action", help="Action identifier, e.g. android.intent.action.SEND")
    cp.set_defaults(func=cmd_classify)

    rp = sub.add_parser("read-data", help="Print base64 content of a local reference")
    rp.add_argument("reference", help="Path or file:// URI")
    rp.set_defaults(func=cmd_read_data)

    return p


def main(argv: List[str] | None = None) -> int:
    """CLI entry."""
    cfg = load_config()
    _configure_logging(cfg)

    parser = build_parser()
    args = parser.parse_args(argv)
    args.cfg = cfg
    log.debug("running %s", args.cmd)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
