from dataclasses import dataclass

from .core import Shape


@dataclass
class Node:
    id: str
    label: str
    shape: Shape = Shape.BOX
