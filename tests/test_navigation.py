"""Tests for navigation — the cursor / open-state machine."""

from __future__ import annotations

from pathlib import Path

from diagnostics import DiagnosticLog
from indent_io import parse_indented
from navigation import NavEvent, Navigator
from node_models import TreeModel


def _navigator(text: str, **kwargs) -> Navigator:
    default_open = kwargs.pop("default_open", False)
    model = TreeModel(parse_indented(text, default_open=default_open))
    return Navigator(model, color=False, **kwargs)


class TestCursorMovement:
    def test_up_clamps_at_zero(self, small_outline: str) -> None:
        nav = _navigator(small_outline)
        assert nav.handle(NavEvent.UP)
        assert nav.cursor == 0

    def test_down_clamps_at_last(self, small_outline: str) -> None:
        nav = _navigator(small_outline)
        for _ in range(5):
            nav.handle(NavEvent.DOWN)
        assert nav.cursor == nav.visible_count() - 1 == 1
        assert nav.current is not None and nav.current.text == "Two"

    def test_empty_outline_is_inert(self) -> None:
        nav = _navigator("")
        for event in (NavEvent.DOWN, NavEvent.UP, NavEvent.COLLAPSE, NavEvent.EXPAND, NavEvent.TOGGLE):
            assert nav.handle(event)
        assert nav.cursor == 0
        assert nav.current is None

    def test_visible_node_out_of_range(self, small_outline: str) -> None:
        nav = _navigator(small_outline)
        assert nav.visible_node(-1) is None
        assert nav.visible_node(2) is None


class TestExpandCollapse:
    def test_expand_opens_node_and_is_idempotent(self, small_outline: str) -> None:
        nav = _navigator(small_outline)
        nav.handle(NavEvent.EXPAND)
        nav.handle(NavEvent.EXPAND)
        assert nav.model.roots[0].is_open
        assert nav.render() == "├── One\n│   ├── One.One\n│   └── One.Two\n└── Two\n"
        assert nav.cursor == 0

    def test_expand_leaf_keeps_it_closed(self, small_outline: str) -> None:
        nav = _navigator(small_outline)
        nav.handle(NavEvent.DOWN)
        nav.handle(NavEvent.EXPAND)
        assert not nav.model.roots[1].is_open

    def test_collapse_open_node_keeps_cursor(self, small_outline: str) -> None:
        nav = _navigator(small_outline, default_open=True)
        nav.handle(NavEvent.COLLAPSE)
        assert nav.cursor == 0
        assert not nav.model.roots[0].is_open
        assert nav.visible_count() == 2

    def test_collapse_leaf_jumps_to_parent(self, small_outline: str) -> None:
        nav = _navigator(small_outline)
        nav.handle(NavEvent.EXPAND)
        nav.handle(NavEvent.DOWN)
        nav.handle(NavEvent.DOWN)
        assert nav.current is not None and nav.current.text == "One.Two"
        nav.handle(NavEvent.COLLAPSE)
        assert nav.cursor == 0
        assert not nav.model.roots[0].is_open
        assert nav.render() == "├── One (2)\n└── Two\n"

    def test_collapse_jump_skips_open_earlier_siblings(self) -> None:
        text = "A\n\tB\n\t\tB1\n\t\tB2\n\tC\nD\n\tE\n\tF"
        nav = _navigator(text, default_open=True)
        # D is at 5; F at 7. Collapsing from F lands on D.
        nav.cursor = 7
        nav.render()
        nav.handle(NavEvent.COLLAPSE)
        assert nav.current is not None and nav.current.text == "D"
        # From C (index 4) the parent A is four rows up, past B's children.
        nav.cursor = 4
        nav.render()
        nav.handle(NavEvent.COLLAPSE)
        assert nav.cursor == 0
        assert [n.text for n in nav.visible] == ["A", "D"]

    def test_collapse_closed_root_is_noop(self, small_outline: str) -> None:
        nav = _navigator(small_outline)
        nav.handle(NavEvent.COLLAPSE)
        assert nav.cursor == 0
        assert nav.visible_count() == 2

    def test_toggle_flips_state(self, small_outline: str) -> None:
        nav = _navigator(small_outline)
        nav.handle(NavEvent.TOGGLE)
        assert nav.visible_count() == 4
        nav.handle(NavEvent.TOGGLE)
        assert nav.visible_count() == 2

    def test_expand_all_and_collapse_all_keep_selection(self, deep_outline: str) -> None:
        nav = _navigator(deep_outline)
        nav.handle(NavEvent.DOWN)
        nav.expand_all()
        assert nav.visible_count() == len(deep_outline.splitlines())
        assert nav.current is not None and nav.current.text == "Two"
        nav.handle(NavEvent.DOWN)
        nav.collapse_all()
        assert nav.visible_count() == 5
        assert nav.current is not None and nav.current.text == "Two"


class TestQuit:
    def test_quit_stops_loop(self, small_outline: str) -> None:
        nav = _navigator(small_outline)
        assert nav.handle(NavEvent.QUIT) is False
        assert nav.render() == ""
        assert nav.handle(NavEvent.DOWN) is False
        assert nav.cursor == 0


class TestDiagnostics:
    def test_transitions_are_logged(self, small_outline: str, tmp_path: Path) -> None:
        log_path = tmp_path / "nav.log"
        nav = _navigator(small_outline, log=DiagnosticLog(log_path))
        nav.handle(NavEvent.DOWN)
        nav.handle(NavEvent.QUIT)
        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert [line.split("\t")[1] for line in lines] == ["DOWN", "QUIT"]
        assert lines[0].endswith("cursor=1 visible=2")


class TestToggleLeaf:
    def test_toggle_on_leaf_flips_flag_but_renders_the_same(self, small_outline: str) -> None:
        nav = _navigator(small_outline)
        nav.handle(NavEvent.DOWN)
        two = nav.model.roots[1]
        before = nav.render()
        nav.handle(NavEvent.TOGGLE)
        assert two.is_open
        assert nav.render() == before
        nav.handle(NavEvent.TOGGLE)
        assert not two.is_open
        assert nav.render() == before
        assert nav.cursor == 1
