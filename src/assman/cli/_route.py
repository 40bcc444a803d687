"""``assman route`` — show how a synthetic request would be dispatched.

Runs the real resolution path with a recording log sink, then prints the
decision, the assembled configuration, and what would have been logged.
Nothing is instantiated.
"""

import argparse
import json
import logging
import sys

from assman.cli._resolve import resolve_dispatcher
from assman.errors import InvalidRequestShape
from assman.logsink import RecordingSink
from assman.routing.request import RoutingRequest


def _parse_fields(pairs: list[str]) -> dict[str, str]:
    body: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            print(f"Error: --field expects KEY=VALUE, got {pair!r}", file=sys.stderr)
            raise SystemExit(2)
        body[key] = value
    return body


def run_route(args: argparse.Namespace) -> None:
    try:
        dispatcher = resolve_dispatcher(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    params: dict[str, str] = {}
    if args.class_ is not None:
        params["class"] = args.class_
    if args.method is not None:
        params["method"] = args.method

    request = RoutingRequest(params=params, files=args.files, body=_parse_fields(args.field))

    sink = RecordingSink()
    try:
        resolution = dispatcher.with_sink(sink).resolve(request)
    except InvalidRequestShape as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    decision = resolution.decision
    print(f"controller: {decision.handler}")
    print(f"method:     {decision.method}")
    print(f"verb:       {decision.verb}")
    print(f"fallback:   {'yes' if decision.fallback else 'no'}")
    print("config:")
    print(json.dumps(resolution.config.as_dict(), indent=2, sort_keys=True))
    if sink.records:
        print("log:")
        for level, message in sink.records:
            print(f"  {logging.getLevelName(level)}: {message}")
