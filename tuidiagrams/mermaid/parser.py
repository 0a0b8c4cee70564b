import logging
import re
from enum import Enum
from typing import Iterator, List, Optional, Set, Tuple, Union

from ..diagram_components.core import BoxChars, Direction, MessageType, Shape
from ..diagram_components.flowchart import Flowchart
from ..diagram_components.sequence import SequenceDiagram
from ..errors import ParseError

logger = logging.getLogger(__name__)


class DiagramKind(str, Enum):

    FLOWCHART = "flowchart"
    SEQUENCE = "sequenceDiagram"
    UNKNOWN = "unknown"


_ID = r"[A-Za-z0-9_]+"
_INLINE_SHAPE = r"(?:\(\([^()]*\)\)|\[[^\]]*\]|\([^()]*\)|\{[^}]*\})?"

NODE_PATTERN = re.compile(
    rf"(?P<id>{_ID})"
    r"(?:\(\((?P<circle>[^()]+)\)\)"
    r"|\[(?P<box>[^\]]+)\]"
    r"|\((?P<rounded>[^()]+)\)"
    r"|\{(?P<diamond>[^}]+)\})"
)
EDGE_PATTERN = re.compile(
    rf"(?P<source>{_ID}){_INLINE_SHAPE}\s*-+>\s*"
    r"(?:\|(?P<label>[^|]*)\|)?\s*"
    rf"(?P<target>{_ID}){_INLINE_SHAPE}"
)
MESSAGE_PATTERN = re.compile(
    rf"(?P<source>{_ID})\s*(?P<arrow>-->>|--\)|-->|->>|-\)|->)\s*(?P<target>{_ID})\s*:(?P<label>.*)"
)

_LEFT_TO_RIGHT_TOKENS = {"LR", "RL"}
_SHAPE_GROUPS = (Shape.CIRCLE, Shape.BOX, Shape.ROUNDED, Shape.DIAMOND)
_ARROW_TYPES = {
    "->>": MessageType.SYNC,
    "->": MessageType.SYNC,
    "-->>": MessageType.RETURN,
    "-->": MessageType.RETURN,
    "-)": MessageType.ASYNC,
    "--)": MessageType.ASYNC,
}
_ACTOR_KEYWORDS = {"participant", "actor"}


def _content_lines(text: str) -> List[str]:
    if not text or not text.strip():
        raise ParseError("Empty diagram text.")
    lines = text.splitlines()
    while not lines[0].strip():
        lines.pop(0)
    return lines


def _statements(lines: List[str]) -> Iterator[str]:
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("%%"):
            continue
        yield line


def _clean_label(label: str) -> str:
    label = label.strip()
    if len(label) >= 2 and label[0] == label[-1] == '"':
        label = label[1:-1]
    return label


def detect_kind(text: str) -> DiagramKind:
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        keyword = line.split()[0]
        if keyword in {"graph", "flowchart"}:
            return DiagramKind.FLOWCHART
        if keyword.startswith("sequenceDiagram"):
            return DiagramKind.SEQUENCE
        return DiagramKind.UNKNOWN
    return DiagramKind.UNKNOWN


def _scan_edges(line: str) -> Iterator[Tuple[str, str, str]]:
    position = 0
    while True:
        match = EDGE_PATTERN.search(line, position)
        if match is None:
            return
        yield match.group("source"), (match.group("label") or "").strip(), match.group("target")
        # the destination of one hop is the source of the next in `A --> B --> C`
        position = match.start("target")


def parse_flowchart(text: str, *, box_style: Optional[Union[str, BoxChars]] = None) -> Flowchart:
    """Build a :class:`Flowchart` from ``graph``/``flowchart`` text.

    The first non-blank line is the header; its second token picks the
    direction (``LR``/``RL`` read left to right, anything else top to
    bottom). Node declarations register the first shape and label seen
    for an id; every ``-->`` hop appends an edge, declared or not.
    """
    header, *body = _content_lines(text)
    tokens = header.split()
    direction = Direction.TOP_TO_BOTTOM
    if len(tokens) > 1 and tokens[1].upper() in _LEFT_TO_RIGHT_TOKENS:
        direction = Direction.LEFT_TO_RIGHT

    flow = Flowchart(direction, box_style=box_style)
    declared: Set[str] = set()

    for line in _statements(body):
        for match in NODE_PATTERN.finditer(line):
            node_id = match.group("id")
            if node_id in declared:
                continue
            shape = next(shape for shape in _SHAPE_GROUPS if match.group(shape.value) is not None)
            flow.add_node(node_id, _clean_label(match.group(shape.value)), shape)
            declared.add(node_id)

        for source, label, target in _scan_edges(line):
            flow.add_edge(source, target, label)

    logger.debug("Parsed flowchart with %d nodes and %d edges", len(flow.nodes), len(flow.edges))
    return flow


def parse_sequence(text: str, *, box_style: Optional[Union[str, BoxChars]] = None) -> SequenceDiagram:
    """Build a :class:`SequenceDiagram` from ``sequenceDiagram`` text."""
    lines = _content_lines(text)
    if lines[0].strip().startswith("sequenceDiagram"):
        lines = lines[1:]

    seq = SequenceDiagram(box_style=box_style)
    known: Set[str] = set()

    def register(actor_id: str, name: str) -> None:
        if actor_id not in known:
            seq.add_actor(actor_id, name)
            known.add(actor_id)

    for line in _statements(lines):
        match = MESSAGE_PATTERN.search(line)
        if match is not None:
            source, target = match.group("source"), match.group("target")
            register(source, source)
            register(target, target)
            seq.add_message(source, target, match.group("label").strip(), _ARROW_TYPES[match.group("arrow")])
            continue

        parts = line.split()
        if parts[0] in _ACTOR_KEYWORDS and len(parts) >= 2:
            name = parts[1]
            if len(parts) > 3 and parts[2] == "as":
                name = " ".join(parts[3:])
            register(parts[1], name)

    logger.debug("Parsed sequence diagram with %d actors and %d messages", len(seq.actors), len(seq.messages))
    return seq


def parse_diagram(
    text: str, *, box_style: Optional[Union[str, BoxChars]] = None
) -> Union[Flowchart, SequenceDiagram]:
    header = _content_lines(text)[0].strip()
    kind = detect_kind(header)
    if kind == DiagramKind.FLOWCHART:
        return parse_flowchart(text, box_style=box_style)
    if kind == DiagramKind.SEQUENCE:
        return parse_sequence(text, box_style=box_style)
    raise ParseError(f"Unsupported diagram type: {header}")
