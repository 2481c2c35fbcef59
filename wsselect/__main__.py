import argparse
import json
import logging
import sys

from .selector import WorkspaceSelector
from .workspace import load_workspaces


STDIN = "-"
EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_BAD_INPUT = 2


def read_json(filepath):
    if filepath == STDIN:
        return json.load(sys.stdin)
    with open(filepath, "r") as f:
        return json.load(f)


def format_workspaces(workspaces):
    return [{"id": workspace.id, "name": workspace.name} for workspace in workspaces]


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="wsselect", description="Filter compositor workspaces with a selector."
    )
    parser.add_argument("selector", type=str, help='Selector string, e.g. "r[1-5] m[DP-1]".')
    parser.add_argument(
        "-w",
        "--workspaces",
        default=STDIN,
        type=str,
        help="JSON file from `hyprctl workspaces -j` (default: stdin).",
    )
    parser.add_argument(
        "-c",
        "--clients",
        default=None,
        type=str,
        help="JSON file from `hyprctl clients -j`.",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print matches as a JSON list."
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Verbosity level."
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.verbose == 1:
        logging.getLogger().setLevel(logging.INFO)
    elif args.verbose > 1:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        workspaces_json = read_json(args.workspaces)
        clients_json = read_json(args.clients) if args.clients else []
    except (OSError, json.JSONDecodeError) as e:
        logging.error(f"Could not read workspace data: {e}")
        return EXIT_BAD_INPUT

    selector = WorkspaceSelector(args.selector)
    logging.info(f"Parsed {len(selector)} selectors from {args.selector!r}")

    try:
        workspaces = load_workspaces(workspaces_json, clients_json)
        matched = selector.filter(workspaces)
    except (AttributeError, TypeError, KeyError) as e:
        logging.error(f"Malformed workspace data: {e!r}")
        return EXIT_BAD_INPUT
    logging.debug(f"Matched {len(matched)} of {len(workspaces)} workspaces")

    if args.json:
        print(json.dumps(format_workspaces(matched)))
    else:
        for workspace in matched:
            print(workspace.name)

    return EXIT_MATCH if matched else EXIT_NO_MATCH


if __name__ == "__main__":
    sys.exit(main())
