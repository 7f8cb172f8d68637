"""CLI entrypoint."""

from __future__ import annotations

import argparse
import functools
import logging
from pathlib import Path

import anyio

from dirsure.context import CwdContext
from dirsure.errors import DirsureError
from dirsure.layout import apply_layout, apply_layout_async, load_layout


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dirsure", description="Make a directory match the requested state.")
    parser.add_argument("path", nargs="?", help="Directory to reconcile, relative to --cwd")
    parser.add_argument("--absent", action="store_true", help="Make sure nothing exists at the path")
    parser.add_argument("--empty", action="store_true", help="Remove everything inside the directory")
    parser.add_argument("--mode", type=str, default=None, help="Octal permission bits, e.g. 755")
    parser.add_argument("--cwd", type=str, default=None, help="Base directory for relative paths")
    parser.add_argument("--layout", type=str, default=None, help="YAML layout file listing directories")
    parser.add_argument("--async", dest="use_async", action="store_true", help="Use the non-blocking driver")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every filesystem change")
    return parser


def run(args: argparse.Namespace) -> list[CwdContext]:
    if args.layout is not None:
        layout_path = Path(args.layout)
        layout = load_layout(layout_path)
        # Layout roots are relative to the layout file unless --cwd says otherwise.
        context = CwdContext(args.cwd or str(layout_path.resolve().parent))
        if args.use_async:
            return anyio.run(apply_layout_async, layout, context)
        return apply_layout(layout, context)

    context = CwdContext(args.cwd)
    kwargs = {"exists": not args.absent, "empty": args.empty, "mode": args.mode}
    if args.use_async:
        return [anyio.run(functools.partial(context.dir_async, args.path, **kwargs))]
    return [context.dir(args.path, **kwargs)]


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.path is None) == (args.layout is None):
        parser.error("provide exactly one of PATH or --layout")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        results = run(args)
    except DirsureError as error:
        parser.exit(2, f"{parser.prog}: error: {error}\n")
    for context in results:
        print(context.cwd())
