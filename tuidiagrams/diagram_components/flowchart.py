import logging
from collections import defaultdict, deque
from typing import Dict, List, Optional, Tuple, Union

from ..errors import ConfigurationError
from .core import BoxChars, Direction, Shape, coerce_direction, coerce_enum, resolve_box_chars
from .edge import Edge
from .node import Node
from .shapes import render_node, render_node_inline

logger = logging.getLogger(__name__)

EDGE_INDENT = "    "
CONTINUATION_INDENT = " " * 7


class Flowchart:

    def __init__(
        self,
        direction: Union[str, Direction] = Direction.TOP_TO_BOTTOM,
        *,
        box_style: Optional[Union[str, BoxChars]] = None,
    ):
        self.direction = coerce_direction(direction)
        self.chars = resolve_box_chars(box_style)
        self.nodes: List[Node] = []
        self.edges: List[Edge] = []

    def add_node(
        self, node_id: str, label: str, shape: Union[str, Shape] = Shape.BOX
    ) -> "Flowchart":
        if not isinstance(node_id, str):
            raise ConfigurationError("node_id must be a string.")
        self.nodes.append(Node(node_id, str(label), coerce_enum(Shape, shape, "node shape")))
        return self

    def add_edge(self, source: str, target: str, label: Optional[str] = "") -> "Flowchart":
        self.edges.append(Edge(source, target, label or ""))
        return self

    def _build_graph(self) -> Tuple[Dict[str, Node], Dict[str, List[Edge]], Dict[str, int]]:
        node_map = {node.id: node for node in self.nodes}
        outgoing: Dict[str, List[Edge]] = defaultdict(list)
        incoming = {node.id: 0 for node in self.nodes}
        for edge in self.edges:
            outgoing[edge.source].append(edge)
            incoming[edge.target] = incoming.get(edge.target, 0) + 1
        return node_map, outgoing, incoming

    def _roots(self, incoming: Dict[str, int]) -> List[str]:
        roots: List[str] = []
        for node in self.nodes:
            if incoming[node.id] == 0 and node.id not in roots:
                roots.append(node.id)
        if not roots:
            roots = [self.nodes[0].id]
        return roots

    def traversal_order(self) -> List[str]:
        """Breadth-first node ids from the insertion-ordered roots, each once."""
        if not self.nodes:
            return []
        return self._walk(*self._build_graph())

    def _walk(
        self, node_map: Dict[str, Node], outgoing: Dict[str, List[Edge]], incoming: Dict[str, int]
    ) -> List[str]:
        order: List[str] = []
        visited = set()
        queue = deque(self._roots(incoming))
        while queue:
            node_id = queue.popleft()
            if node_id in visited:
                continue
            visited.add(node_id)
            order.append(node_id)
            for edge in outgoing.get(node_id, ()):
                if edge.target in visited:
                    continue
                if edge.target not in node_map:
                    logger.debug("Edge %s -> %s targets an undeclared node", edge.source, edge.target)
                    continue
                queue.append(edge.target)

        skipped = len(node_map) - len(visited)
        if skipped:
            logger.debug("%d node(s) unreachable from the flowchart roots are not rendered", skipped)
        return order

    def render(self) -> str:
        if not self.nodes:
            return ""
        if self.direction == Direction.LEFT_TO_RIGHT:
            return self._render_horizontal()
        return self._render_vertical()

    def _render_vertical(self) -> str:
        node_map, outgoing, incoming = self._build_graph()
        blocks: List[str] = []
        for node_id in self._walk(node_map, outgoing, incoming):
            lines = [render_node(node_map[node_id], self.chars)]
            lines.extend(self._vertical_edge(edge) for edge in outgoing.get(node_id, ()))
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks).rstrip()

    def _render_horizontal(self) -> str:
        node_map, outgoing, incoming = self._build_graph()
        parts: List[str] = []
        for index, node_id in enumerate(self._walk(node_map, outgoing, incoming)):
            if index > 0:
                parts.append("  ")
            parts.append(render_node_inline(node_map[node_id]))

            edges = outgoing.get(node_id, [])
            if not edges:
                continue
            parts.append(" " + self._horizontal_edge(edges[0]))
            for edge in edges[1:]:
                parts.append(
                    f"\n{CONTINUATION_INDENT}{self.chars.vertical} {self._horizontal_edge(edge)}"
                )
        return "".join(parts)

    def _vertical_edge(self, edge: Edge) -> str:
        arrow = f"{EDGE_INDENT}{self.chars.arrow_down}"
        if edge.label:
            return f"{EDGE_INDENT}{self.chars.vertical} {edge.label}\n{arrow}"
        return arrow

    def _horizontal_edge(self, edge: Edge) -> str:
        if edge.label:
            return f"{self.chars.horizontal}[{edge.label}]{self.chars.arrow_right}"
        return f"{self.chars.horizontal * 2}{self.chars.arrow_right}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Flowchart(direction={self.direction.name}, "
            f"nodes={len(self.nodes)}, edges={len(self.edges)})"
        )
