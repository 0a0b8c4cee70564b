"""Command line entry point: render mermaid sources or a demo gallery."""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from .diagram_components import BarChart, Direction, Flowchart, MessageType, Orientation, SequenceDiagram, Shape
from .errors import DiagramError
from .mermaid import extract_diagram_blocks, parse_diagram

logger = logging.getLogger(__name__)

MERMAID_SUFFIXES = {".mmd"}
MARKDOWN_SUFFIXES = {".md", ".markdown"}
BOX_STYLES = ["square", "rounded", "ascii"]


def _print(console: Console, rendered: str) -> None:
    console.print(Text.from_ansi(rendered), soft_wrap=True)


def _render_mermaid(console: Console, source: str, box_style: str) -> int:
    try:
        diagram = parse_diagram(source, box_style=box_style)
    except DiagramError as exc:
        console.print(f"Error: {exc}", markup=False, highlight=False)
        return 1
    _print(console, diagram.render())
    return 0


def _render_markdown(console: Console, source: str, box_style: str) -> int:
    blocks = extract_diagram_blocks(source, box_style=box_style)
    if not blocks:
        console.print("No mermaid diagrams found in file", highlight=False)
        return 0

    for index, block in enumerate(blocks, start=1):
        console.rule(f"Diagram {index} ({block.kind.value})")
        if block.diagram is not None:
            _print(console, block.diagram.render())
        else:
            _print(console, f"Unable to parse {block.kind.value} diagram\nContent:\n{block.raw_text}")
        console.print()
    return 0


def render_file(path: Path, console: Console, box_style: str = "square") -> int:
    suffix = path.suffix.lower()
    if suffix not in MERMAID_SUFFIXES | MARKDOWN_SUFFIXES:
        console.print(f"Unsupported file type: {suffix or path.name} (use .md or .mmd)", markup=False)
        return 1
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        console.print(f"Failed to read {path}: {exc}", markup=False, highlight=False)
        return 1

    logger.debug("Rendering %s (%d characters)", path, len(source))
    if suffix in MERMAID_SUFFIXES:
        return _render_mermaid(console, source, box_style)
    return _render_markdown(console, source, box_style)


def demo_diagrams(box_style: str = "square") -> List[str]:
    auth = Flowchart(Direction.TOP_TO_BOTTOM, box_style=box_style)
    (
        auth.add_node("start", "User Login", Shape.ROUNDED)
        .add_node("input", "Enter Credentials")
        .add_node("validate", "Valid Format?", Shape.DIAMOND)
        .add_node("token", "Generate JWT")
        .add_node("error", "Show Error")
        .add_node("success", "Login Success", Shape.ROUNDED)
    )
    (
        auth.add_edge("start", "input")
        .add_edge("input", "validate")
        .add_edge("validate", "token", "yes")
        .add_edge("validate", "error", "no")
        .add_edge("token", "success")
        .add_edge("error", "input", "retry")
    )

    pipeline = Flowchart(Direction.LEFT_TO_RIGHT, box_style=box_style)
    (
        pipeline.add_node("commit", "Commit", Shape.ROUNDED)
        .add_node("build", "Build")
        .add_node("test", "Test")
        .add_node("deploy", "Deploy")
        .add_node("done", "Live", Shape.CIRCLE)
    )
    (
        pipeline.add_edge("commit", "build")
        .add_edge("build", "test")
        .add_edge("test", "deploy")
        .add_edge("deploy", "done")
    )

    orders = SequenceDiagram(box_style=box_style)
    (
        orders.add_actor("client", "Client")
        .add_actor("api", "API Gateway")
        .add_actor("order", "Orders")
        .add_actor("payment", "Payment")
    )
    (
        orders.add_message("client", "api", "POST /orders")
        .add_message("api", "order", "Create Order")
        .add_message("order", "payment", "Charge Card")
        .add_message("payment", "order", "Success", MessageType.RETURN)
        .add_message("order", "order", "Save to DB")
        .add_message("order", "api", "Created", MessageType.RETURN)
        .add_message("api", "client", "201", MessageType.RETURN)
    )

    languages = BarChart("Language Popularity", Orientation.HORIZONTAL, width=40, box_style=box_style)
    (
        languages.add_bar_with_color("Python", 100, "\x1b[32m")
        .add_bar_with_color("Go", 72.5, "\x1b[36m")
        .add_bar("Rust", 48)
        .add_bar("Zig", 12.34)
    )

    latency = BarChart("Latency (ms)", Orientation.VERTICAL, width=5, height=8, box_style=box_style)
    latency.add_bar("p50", 12).add_bar("p90", 38).add_bar("p99", 95.5)

    return [chart.render() for chart in (auth, pipeline, orders, languages, latency)]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tuidiagrams",
        description="Render flowcharts, sequence diagrams and bar charts as terminal text",
    )
    parser.add_argument("--style", default="square", choices=BOX_STYLES, help="Box drawing style")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    render_parser = subparsers.add_parser("render", help="Render a .mmd file or the mermaid blocks of a .md file")
    render_parser.add_argument("path", type=Path)
    subparsers.add_parser("demo", help="Render the sample diagrams")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    console = Console()

    if args.command == "render":
        if not args.path.is_file():
            console.print(f"File not found: {args.path}", markup=False, highlight=False)
            return 1
        return render_file(args.path, console, args.style)

    for rendered in demo_diagrams(args.style):
        _print(console, rendered)
        console.print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
