import pytest

from tuidiagrams import ConfigurationError, MessageType, SequenceDiagram


def two_actors() -> SequenceDiagram:
    return SequenceDiagram().add_actor("alice", "Alice").add_actor("bob", "Bob")


def test_empty_sequence_renders_nothing():
    assert SequenceDiagram().render() == ""


def test_builder_records_actors_and_messages():
    seq = two_actors()
    result = seq.add_message("alice", "bob", "Hello").add_message("bob", "bob", "Think", "async")

    assert result is seq
    assert [actor.name for actor in seq.actors] == ["Alice", "Bob"]
    assert seq.messages[0].type == MessageType.SYNC
    assert seq.messages[1].type == MessageType.ASYNC
    assert not seq.messages[0].is_self
    assert seq.messages[1].is_self


def test_actor_name_defaults_to_id():
    assert SequenceDiagram().add_actor("db").actors[0].name == "db"


def test_invalid_layout_options():
    with pytest.raises(ConfigurationError):
        SequenceDiagram(actor_width=2)
    with pytest.raises(ConfigurationError):
        SequenceDiagram(spacing=-1)
    with pytest.raises(ConfigurationError):
        two_actors().add_message("alice", "bob", "x", "telepathy")


def test_full_render_of_one_message():
    lines = two_actors().add_message("alice", "bob", "Hi").render().split("\n")

    assert lines == [
        "   Alice" + " " * 14 + "Bob",
        "┌──────────┐      ┌──────────┐",
        " " * 6 + "│" + " " * 17 + "│",
        " " * 6 + "──── Hi ────→",
        " " * 6 + "│" + " " * 17 + "│",
        "└──────────┘      └──────────┘",
    ]


def test_return_message_points_left_with_dashed_rule():
    lines = two_actors().add_message("bob", "alice", "ok", MessageType.RETURN).render().split("\n")

    assert lines[3] == " " * 6 + "←---- ok ----"


def test_odd_rule_length_rounds_down_each_side():
    lines = two_actors().add_message("alice", "bob", "Hey").render().split("\n")

    assert lines[3] == " " * 6 + "─── Hey ───→"


def test_long_label_abuts_without_rule():
    label = "a label far wider than the gap between two actors"
    lines = two_actors().add_message("alice", "bob", label).render().split("\n")

    assert lines[3] == " " * 6 + label + "→"


def test_self_message_draws_stub_and_keeps_other_lifelines():
    lines = two_actors().add_message("alice", "alice", "think").render().split("\n")

    assert lines[3] == " " * 6 + "│→[think]" + " " * 9 + "│"


def test_columns_after_span_stay_aligned():
    seq = two_actors().add_actor("carol", "Carol").add_message("alice", "bob", "Hi")
    line = seq.render().split("\n")[3]

    assert line.startswith(" " * 6 + "──── Hi ────→")
    assert line[42] == "│"
    assert len(line) == 43


def test_wide_message_pushes_later_lifelines_right():
    label = "a label that is much wider than one actor gap"
    seq = two_actors().add_actor("carol", "Carol").add_message("alice", "bob", label)
    lines = seq.render().split("\n")

    assert lines[2][42] == "│"
    assert lines[3] == " " * 6 + label + "→ │"


def test_wide_self_message_keeps_next_lifeline():
    label = "persist the current order snapshot"
    lines = two_actors().add_message("alice", "alice", label).render().split("\n")

    assert lines[3] == " " * 6 + "│→[" + label + "] │"
    assert lines[4][24] == "│"


def test_unknown_actor_leaves_idle_lifelines():
    lines = two_actors().add_message("alice", "ghost", "boo").render().split("\n")

    assert lines[3] == lines[2]
    assert "boo" not in "\n".join(lines)


def test_header_names_are_truncated_to_column_width():
    seq = SequenceDiagram().add_actor("svc", "Extremely Long Service")

    assert seq.render().split("\n")[0] == "Extremely Lo"


def test_ascii_style_sequence():
    output = two_actors().add_message("alice", "bob", "Hi").render()
    ascii_output = SequenceDiagram(box_style="ascii").add_actor("a").add_actor("b").add_message("a", "b", "Hi").render()

    assert "→" in output
    assert "+----------+" in ascii_output
    assert "---- Hi ---->" in ascii_output
