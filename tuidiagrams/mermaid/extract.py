import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Union

from ..diagram_components.core import BoxChars, Diagram
from ..errors import ParseError
from .parser import DiagramKind, detect_kind, parse_flowchart, parse_sequence

logger = logging.getLogger(__name__)

OPEN_FENCE = re.compile(r"^(?P<fence>```|~~~)\s*mermaid\b")

_PARSERS = {
    DiagramKind.FLOWCHART: parse_flowchart,
    DiagramKind.SEQUENCE: parse_sequence,
}


@dataclass
class ParsedBlock:
    kind: DiagramKind
    raw_text: str
    diagram: Optional[Diagram] = None


def _parse_block(content: str, box_style: Optional[Union[str, BoxChars]]) -> ParsedBlock:
    kind = detect_kind(content)
    block = ParsedBlock(kind=kind, raw_text=content)
    parser = _PARSERS.get(kind)
    if parser is None:
        logger.debug("Skipping mermaid block of unsupported kind")
        return block
    try:
        block.diagram = parser(content, box_style=box_style)
    except ParseError as exc:
        logger.warning("Could not parse %s block: %s", kind.value, exc)
    return block


def extract_diagram_blocks(
    document: str, *, box_style: Optional[Union[str, BoxChars]] = None
) -> List[ParsedBlock]:
    """Return every fenced ``mermaid`` block of ``document`` in order.

    Blocks that are not flowcharts or sequence diagrams, or that fail to
    parse, are still returned with ``diagram`` left as ``None``.
    """
    blocks: List[ParsedBlock] = []
    fence: Optional[str] = None
    current: List[str] = []

    for line in document.splitlines():
        stripped = line.strip()
        if fence is None:
            match = OPEN_FENCE.match(stripped)
            if match:
                fence = match.group("fence")
                current = []
            continue
        if stripped.startswith(fence):
            blocks.append(_parse_block("\n".join(current), box_style))
            fence = None
            continue
        current.append(line)

    if fence is not None:
        logger.debug("Ignoring unclosed mermaid block at end of document")
    return blocks
