from .parser import DiagramKind, detect_kind, parse_diagram, parse_flowchart, parse_sequence
from .extract import ParsedBlock, extract_diagram_blocks
