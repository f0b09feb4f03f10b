import pytest

from skillmap.model.builder import build_graph
from skillmap.model.progression import ProgressionEngine
from skillmap.view.dispatcher import InputDispatcher, to_surface


@pytest.fixture
def setup(scenario_items):
    graph, active_id = build_graph(scenario_items, 800)
    engine = ProgressionEngine(graph, active_id)
    repaints = []
    dispatcher = InputDispatcher(graph, engine, lambda: repaints.append(1))
    return graph, engine, dispatcher, repaints


def test_to_surface():
    assert to_surface(150.0, 90.0, 100.0, 40.0) == (50.0, 50.0)


def test_hit_test_center_inside_and_radius_plus_one_outside(setup):
    graph, _, dispatcher, _ = setup
    s1 = graph.node("s1")
    assert dispatcher.hit_test(s1.x, s1.y) is s1
    assert dispatcher.hit_test(s1.x + s1.radius + 1, s1.y) is None
    assert dispatcher.hit_test(s1.x + s1.radius, s1.y) is s1


def test_hit_test_only_available(setup):
    graph, _, dispatcher, _ = setup
    s2 = graph.node("s2")
    assert dispatcher.hit_test(s2.x, s2.y) is s2
    assert dispatcher.hit_test(s2.x, s2.y, only_available=True) is None


def test_hover_marks_any_node_and_repaints(setup):
    graph, _, dispatcher, repaints = setup
    s2 = graph.node("s2")
    assert dispatcher.hover(s2.x, s2.y) == "s2"
    assert dispatcher.hovered_id == "s2"
    assert dispatcher.hover(0.0, 0.0) is None
    assert dispatcher.hovered_id is None
    assert len(repaints) == 2


def test_leave_clears_hover(setup):
    graph, _, dispatcher, repaints = setup
    dispatcher.hover(graph.node("t1").x, graph.node("t1").y)
    dispatcher.leave()
    assert dispatcher.hovered_id is None
    assert len(repaints) == 2
    dispatcher.leave()
    assert len(repaints) == 2


def test_click_available_node_activates(setup):
    graph, engine, dispatcher, repaints = setup
    s1 = graph.node("s1")
    assert dispatcher.click(s1.x, s1.y) == "s1"
    assert engine.active_id == "s1"
    assert {n.uid for n in graph if n.is_available} == {"s1", "t1", "s2"}
    assert repaints == [1]

    s2 = graph.node("s2")
    assert dispatcher.click(s2.x, s2.y) == "s2"
    assert graph.node("s1").is_available
    assert [n.uid for n in graph if n.is_active] == ["s2"]


def test_click_unavailable_or_empty_is_ignored(setup):
    graph, engine, dispatcher, repaints = setup
    s2 = graph.node("s2")
    assert dispatcher.click(s2.x, s2.y) is None
    assert dispatcher.click(5.0, 5.0) is None
    assert engine.active_id == "t1"
    assert repaints == []


def test_click_active_node_is_ignored(setup):
    graph, engine, dispatcher, repaints = setup
    t1 = graph.node("t1")
    assert dispatcher.click(t1.x, t1.y) is None
    assert engine.active_id == "t1"
    assert repaints == []


def test_node_contains_matches_hit_test(setup):
    graph, _, dispatcher, _ = setup
    t1 = graph.node("t1")
    assert t1.contains(t1.x, t1.y)
    assert t1.contains(t1.x, t1.y - t1.radius)
    assert not t1.contains(t1.x, t1.y - t1.radius - 1)
    assert dispatcher.hit_test(t1.x, t1.y - t1.radius - 1) is None
