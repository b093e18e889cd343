"""Command line access to the outline engine."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from todotree.config import INDENT_UNIT
from todotree.document import SAMPLE_OUTLINE, OutlineDocument
from todotree.schemas import ROOT, DropPosition, DropRequest, MoveRequest
from todotree.serializer import canonicalize, serialize_outline
from todotree.tree_utils import find_node, iter_with_depth
from todotree.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todotree", description="View and reorder indented outlines.")
    commands = parser.add_subparsers(dest="command", required=True)

    init = commands.add_parser("init", help="Write the starter outline")
    init.add_argument(
        "path", type=Path, nargs="?", default=Path("."), help="File, or directory for todo_list.txt"
    )

    show = commands.add_parser("show", help="List nodes with their depth and kind")
    show.add_argument("file", type=Path)
    show.add_argument("--ids", action="store_true", help="Include node ids")

    fmt = commands.add_parser("format", help="Rewrite with canonical four-space indentation")
    fmt.add_argument("file", type=Path)
    fmt.add_argument("-o", "--output", type=Path, help="Write here instead of in place")

    move = commands.add_parser("move", help="Move a node into a container at an index")
    move.add_argument("file", type=Path)
    move.add_argument("source_id")
    move.add_argument("--into", default="root", help="Container id, or 'root' (default)")
    move.add_argument("--index", type=int, default=0)
    move.add_argument("-o", "--output", type=Path)

    drop = commands.add_parser("drop", help="Drop a node before or after another node")
    drop.add_argument("file", type=Path)
    drop.add_argument("source_id")
    drop.add_argument("target_id", nargs="?", help="Omit to append at the root level")
    drop.add_argument(
        "--position",
        choices=[position.value for position in DropPosition],
        default=DropPosition.AFTER.value,
    )
    drop.add_argument("-o", "--output", type=Path)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    return asyncio.run(_run(args))


async def _run(args: argparse.Namespace) -> int:
    if args.command == "init":
        return await _write(OutlineDocument(canonicalize(SAMPLE_OUTLINE)), args.path, args.command)

    document = OutlineDocument()
    if not await document.import_file(args.file):
        print(document.error, file=sys.stderr)
        return 1

    if args.command == "show":
        for node, depth in iter_with_depth(document.forest):
            label = f"{node.name} ({node.kind.value})"
            if args.ids:
                label = f"[{node.id}] {label}"
            print(INDENT_UNIT * depth + label)
        return 0

    if args.command in ("move", "drop"):
        if args.command == "move":
            related = None if args.into == "root" else args.into
        else:
            related = args.target_id
        unknown = _unknown_id(document, args.source_id, related)
        if unknown:
            print(f"Unknown node id {unknown!r}", file=sys.stderr)
            return 2

    if args.command == "move":
        container_id = ROOT if args.into == "root" else args.into
        request = MoveRequest(source_id=args.source_id, container_id=container_id, index=args.index)
        if not document.apply(request):
            print(f"Cannot move {args.source_id!r} into {args.into!r}", file=sys.stderr)
            return 2
    elif args.command == "drop":
        request = DropRequest(
            source_id=args.source_id,
            target_id=args.target_id,
            position=DropPosition(args.position),
        )
        if not document.apply(request):
            print(f"Cannot drop {args.source_id!r} {args.position} {args.target_id!r}", file=sys.stderr)
            return 2
    else:
        document.set_text(serialize_outline(document.forest))

    return await _write(document, args.output or args.file, args.command)


async def _write(document: OutlineDocument, output: Path, command: str) -> int:
    if not await document.export_file(output):
        print(document.error, file=sys.stderr)
        return 1
    logger.info("Wrote outline", extra={"path": str(output), "command": command})
    return 0


def _unknown_id(document: OutlineDocument, *node_ids: str | None) -> str | None:
    for node_id in node_ids:
        if node_id is not None and find_node(document.forest, node_id) is None:
            return node_id
    return None


if __name__ == "__main__":
    raise SystemExit(main())
