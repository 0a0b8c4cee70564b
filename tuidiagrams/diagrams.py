from .diagram_components import (
    Actor,
    Bar,
    BarChart,
    BoxChars,
    Canvas,
    Diagram,
    Direction,
    Edge,
    Flowchart,
    Message,
    MessageType,
    Node,
    Orientation,
    SequenceDiagram,
    Shape,
)
from .mermaid import (
    DiagramKind,
    ParsedBlock,
    detect_kind,
    extract_diagram_blocks,
    parse_diagram,
    parse_flowchart,
    parse_sequence,
)

__all__ = [
    "Actor",
    "Bar",
    "BarChart",
    "BoxChars",
    "Canvas",
    "Diagram",
    "DiagramKind",
    "Direction",
    "Edge",
    "Flowchart",
    "Message",
    "MessageType",
    "Node",
    "Orientation",
    "ParsedBlock",
    "SequenceDiagram",
    "Shape",
    "detect_kind",
    "extract_diagram_blocks",
    "parse_diagram",
    "parse_flowchart",
    "parse_sequence",
]
