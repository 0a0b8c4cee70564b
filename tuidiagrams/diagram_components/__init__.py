from .core import BoxChars, Diagram, Direction, MessageType, Orientation, Shape
from .node import Node
from .edge import Edge
from .flowchart import Flowchart
from .sequence import Actor, Message, SequenceDiagram
from .barchart import Bar, BarChart
from .canvas import Canvas

__all__ = [
    "BoxChars",
    "Diagram",
    "Direction",
    "MessageType",
    "Orientation",
    "Shape",
    "Node",
    "Edge",
    "Flowchart",
    "Actor",
    "Message",
    "SequenceDiagram",
    "Bar",
    "BarChart",
    "Canvas",
]
