#!/usr/bin/env python3
"""
mdlinks CLI

Scan a directory tree of markdown files for inline links and report which
files mention which.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from exporters import describe_all, describe_inbound, describe_orphans, to_json, to_mermaid
from log_config import configure_logging
from scanner.builder import build_graph
from scanner.errors import InternalInvariantError, MdLinksError, NotFound
from scanner.resolver import relative_path

logger = logging.getLogger(__name__)


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="mdlinks",
        description="Report which markdown files link to which.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mdlinks                                 # Every mentioned file under the cwd
  mdlinks --root docs                     # Scan the docs directory
  mdlinks --root docs --link-to docs/a.md # Who mentions docs/a.md
  mdlinks -f json -o graph.json           # Whole graph as JSON
  mdlinks --orphans                       # Also list links to unscanned files
        """,
    )

    parser.add_argument(
        "--root",
        type=str,
        default=os.getcwd(),
        help="Root directory to scan (default: current directory)",
    )

    parser.add_argument(
        "--link-to",
        type=str,
        default="",
        help="Only report files that mention this file (path relative to the current directory). "
             "Text report only; cannot be combined with -f json/mermaid or --orphans",
    )

    # Output options
    parser.add_argument(
        "-f", "--format",
        choices=["text", "json", "mermaid"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "--orphans",
        action="store_true",
        help="List linked paths that were never scanned (text format only)",
    )

    # Logging options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging on stderr",
    )

    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit log lines as JSON",
    )

    parsed = parser.parse_args(args)
    if parsed.link_to and parsed.format != "text":
        parser.error("--link-to only supports the text format")
    if parsed.link_to and parsed.orphans:
        parser.error("--link-to cannot be combined with --orphans")
    return parsed


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)
    configure_logging(verbose=parsed.verbose, log_json=parsed.log_json)

    root = Path(os.path.abspath(parsed.root))

    try:
        graph, files_scanned = build_graph(root)
    except InternalInvariantError:
        logger.exception("internal error while scanning %s", root)
        return 1
    except MdLinksError as e:
        print(f"Error while walking: {e}", file=sys.stderr)
        return 1

    if parsed.link_to:
        try:
            target = _link_to_key(root, parsed.link_to)
            node = graph.get(target)
            if node is None:
                raise NotFound(target)
        except MdLinksError as e:
            print(e, file=sys.stderr)
            return 1
        output = describe_inbound(graph, node)
    elif parsed.format == "json":
        output = to_json(graph, files_scanned=files_scanned)
    elif parsed.format == "mermaid":
        output = to_mermaid(graph)
    else:  # text (default)
        output = describe_all(graph)

    if parsed.orphans and parsed.format == "text":
        orphans = describe_orphans(graph)
        if orphans:
            output = "\n".join(part for part in (output, "Never scanned:", orphans) if part)

    # Write output
    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output + "\n" if output else "", encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    elif output:
        print(output)

    return 0


def _link_to_key(root: Path, link_to: str) -> str:
    """
    Get the canonical key of a --link-to path given relative to the cwd.

    The cwd comes back symlink-resolved, so the root and the directory of
    the link-to path are resolved too before comparing them.
    """
    joined = os.path.join(os.getcwd(), link_to)
    directory = os.path.realpath(os.path.dirname(joined))
    return relative_path(os.path.realpath(root), os.path.join(directory, os.path.basename(joined)))


def path_from_main(args=None):
    """Print a target path relative to a base path (default: the cwd)."""
    if args is None:
        args = sys.argv[1:]

    if len(args) == 1:
        base, target = os.getcwd(), args[0]
    elif len(args) == 2:
        base, target = args
    else:
        print("usage: path-from <base-path=cwd> <target-path>", file=sys.stderr)
        return 1

    try:
        print(relative_path(base, target))
    except MdLinksError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


def run():
    """Console script entry point for ``mdlinks``."""
    sys.exit(main())


def run_path_from():
    """Console script entry point for ``path-from``."""
    sys.exit(path_from_main())


if __name__ == "__main__":
    sys.exit(main())
