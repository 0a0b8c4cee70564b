from .diagrams import *
from .errors import *

__version__ = "0.1.0"
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
    "DiagramError",
    "ConfigurationError",
    "ParseError",
    "LayoutOverflowError",
]
