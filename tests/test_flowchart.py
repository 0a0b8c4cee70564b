import pytest

from tuidiagrams import ConfigurationError, Diagram, Direction, Flowchart, Shape
from tuidiagrams.diagram_components.shapes import (
    render_box,
    render_circle,
    render_diamond,
    render_node_inline,
    render_rounded,
)
from tuidiagrams.diagram_components.node import Node


def test_new_flowchart_is_empty():
    flow = Flowchart(Direction.TOP_TO_BOTTOM)

    assert flow.direction == Direction.TOP_TO_BOTTOM
    assert flow.nodes == []
    assert flow.edges == []
    assert flow.render() == ""


def test_builder_calls_chain_and_keep_insertion_order():
    flow = Flowchart()
    result = flow.add_node("start", "Start", Shape.ROUNDED).add_node("end", "End")
    flow.add_edge("start", "end", "connects")

    assert result is flow
    assert [node.id for node in flow.nodes] == ["start", "end"]
    assert flow.nodes[0].shape == Shape.ROUNDED
    assert flow.nodes[1].shape == Shape.BOX
    assert (flow.edges[0].source, flow.edges[0].target, flow.edges[0].label) == ("start", "end", "connects")


def test_duplicate_node_ids_are_appended():
    flow = Flowchart().add_node("a", "One").add_node("a", "Two")

    assert len(flow.nodes) == 2


@pytest.mark.parametrize(
    "value, expected",
    [("TD", Direction.TOP_TO_BOTTOM), ("tb", Direction.TOP_TO_BOTTOM), ("LR", Direction.LEFT_TO_RIGHT), ("RL", Direction.LEFT_TO_RIGHT)],
)
def test_direction_aliases(value, expected):
    assert Flowchart(value).direction == expected


def test_invalid_options_raise_configuration_error():
    with pytest.raises(ConfigurationError):
        Flowchart("sideways")
    with pytest.raises(ConfigurationError):
        Flowchart(box_style="zigzag")
    with pytest.raises(ConfigurationError):
        Flowchart().add_node("a", "A", "hexagon")


def test_shape_accepts_string_value():
    flow = Flowchart().add_node("a", "A", "diamond")

    assert flow.nodes[0].shape == Shape.DIAMOND


def test_flowchart_satisfies_diagram_protocol():
    assert isinstance(Flowchart(), Diagram)


def test_vertical_render_of_two_nodes():
    flow = Flowchart("TD").add_node("a", "Start").add_node("b", "End").add_edge("a", "b")

    assert flow.render() == (
        "┌───────┐\n"
        "│ Start │\n"
        "└───────┘\n"
        "    ↓\n"
        "\n"
        "┌─────┐\n"
        "│ End │\n"
        "└─────┘"
    )


def test_vertical_render_shows_every_outgoing_edge_label():
    flow = (
        Flowchart()
        .add_node("check", "Ok?", Shape.DIAMOND)
        .add_node("yes", "Proceed")
        .add_node("no", "Stop")
        .add_edge("check", "yes", "yes")
        .add_edge("check", "no", "no")
    )
    output = flow.render()

    assert "    │ yes\n    ↓\n    │ no\n    ↓" in output
    assert output.index("Proceed") < output.index("Stop")


def test_traversal_is_breadth_first_in_edge_order():
    flow = Flowchart()
    for node_id in "abcd":
        flow.add_node(node_id, node_id.upper())
    flow.add_edge("a", "c").add_edge("a", "b").add_edge("b", "d").add_edge("c", "d")

    assert flow.traversal_order() == ["a", "c", "b", "d"]


@pytest.mark.parametrize("direction", ["TD", "LR"])
def test_render_builds_graph_once(monkeypatch, direction):
    flow = Flowchart(direction).add_node("a", "A").add_node("b", "B").add_edge("a", "b")
    calls = []
    build_graph = flow._build_graph

    def counting_build_graph():
        calls.append(1)
        return build_graph()

    monkeypatch.setattr(flow, "_build_graph", counting_build_graph)
    flow.render()

    assert len(calls) == 1


def test_roots_are_taken_in_insertion_order():
    flow = Flowchart()
    for node_id in ("r1", "r2", "c1", "c2"):
        flow.add_node(node_id, node_id)
    flow.add_edge("r1", "c1").add_edge("r2", "c2")

    assert flow.traversal_order() == ["r1", "r2", "c1", "c2"]


def test_cycle_falls_back_to_first_node():
    flow = Flowchart().add_node("a", "A").add_node("b", "B").add_edge("a", "b").add_edge("b", "a")

    assert flow.traversal_order() == ["a", "b"]
    assert flow.render().count("│ A │") == 1


def test_reachable_nodes_render_exactly_once():
    flow = Flowchart()
    for node_id in "abcd":
        flow.add_node(node_id, f"Node {node_id}")
    flow.add_edge("a", "b").add_edge("a", "c").add_edge("b", "d").add_edge("c", "d")
    output = flow.render()

    for node_id in "abcd":
        assert output.count(f"│ Node {node_id} │") == 1


def test_unreachable_nodes_are_not_rendered():
    flow = (
        Flowchart()
        .add_node("a", "Alpha")
        .add_node("b", "Beta")
        .add_node("island", "Island")
        .add_edge("a", "b")
        .add_edge("island", "island")
    )

    assert "Island" not in flow.render()


def test_unresolved_edge_target_degrades():
    flow = Flowchart().add_node("a", "Alpha").add_edge("a", "ghost", "lost")

    assert flow.traversal_order() == ["a"]
    output = flow.render()
    assert "Alpha" in output
    assert "│ lost" in output


def test_horizontal_render_inline():
    flow = Flowchart("LR").add_node("a", "A").add_node("b", "B").add_edge("a", "b")

    assert flow.render() == "[A] ──→  [B]"


def test_horizontal_render_continuation_lines():
    flow = (
        Flowchart("LR")
        .add_node("a", "A")
        .add_node("b", "B")
        .add_node("c", "C")
        .add_edge("a", "b", "yes")
        .add_edge("a", "c")
    )

    assert flow.render() == "[A] ─[yes]→\n       │ ──→  [B]  [C]"


def test_ascii_box_style():
    flow = Flowchart(box_style="ascii").add_node("a", "A").add_node("b", "B").add_edge("a", "b")
    output = flow.render()

    assert "+---+" in output
    assert "    v" in output


def test_box_primitives():
    lines = render_box("Hello").split("\n")

    assert lines == ["┌───────┐", "│ Hello │", "└───────┘"]
    assert render_rounded("Hi").split("\n") == ["╭────╮", "│ Hi │", "╰────╯"]


def test_diamond_and_circle_primitives():
    assert render_diamond("Hi") == "   ◆\n< Hi >\n   ◆"
    assert render_circle("Hi") == "( Hi )"


@pytest.mark.parametrize(
    "shape, expected",
    [(Shape.BOX, "[x]"), (Shape.ROUNDED, "(x)"), (Shape.DIAMOND, "<x>"), (Shape.CIRCLE, "((x))")],
)
def test_inline_brackets(shape, expected):
    assert render_node_inline(Node("n", "x", shape)) == expected
