from dataclasses import dataclass


@dataclass
class Edge:
    source: str
    target: str
    label: str = ""
