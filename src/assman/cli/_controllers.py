"""``assman controllers`` — list registered controllers."""

import argparse
import sys

from assman.cli._resolve import resolve_dispatcher


def run_controllers(args: argparse.Namespace) -> None:
    """Print every registered controller identifier and its class field.

    The class field column is what a request must send as ``class`` to
    reach the controller.
    """
    try:
        dispatcher = resolve_dispatcher(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    registry = dispatcher.registry
    names = registry.names
    if not names:
        print("No controllers registered.")
        return

    suffix = dispatcher.config.controller_suffix
    prefix = f"{registry.namespace}."
    rows: list[tuple[str, str]] = []
    for identifier in names:
        bare = identifier.removeprefix(prefix)
        class_field = bare.removesuffix(suffix).lower() if bare.endswith(suffix) else "-"
        rows.append((class_field, identifier))

    width = max(max(len(r[0]) for r in rows), 5)  # "CLASS" header
    fmt = f"{{:<{width}}}  {{}}"
    print(fmt.format("CLASS", "CONTROLLER"))
    print("-" * min(width + 2 + max(len(r[1]) for r in rows), 80))
    for class_field, identifier in rows:
        print(fmt.format(class_field, identifier))
