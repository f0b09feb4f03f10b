import pytest

from skillmap.model.builder import build_graph
from skillmap.model.progression import ProgressionEngine, ProgressionError, available_ids, transition


def _available(graph):
    return {n.uid for n in graph if n.is_available}


def _active(graph):
    return [n.uid for n in graph if n.is_active]


def test_walkthrough(scenario_items):
    graph, active_id = build_graph(scenario_items, 800)
    engine = ProgressionEngine(graph, active_id)

    assert _active(graph) == ["t1"]
    assert _available(graph) == {"t1", "s1"}

    engine.activate("s1")
    assert _active(graph) == ["s1"]
    assert _available(graph) == {"s1", "t1", "s2"}

    engine.activate("s2")
    assert engine.active_id == "s2"
    assert _active(graph) == ["s2"]
    assert graph.node("s1").is_available


def test_without_active_node_nothing_is_available(course_items):
    graph, active_id = build_graph(course_items, 800)
    engine = ProgressionEngine(graph, active_id)
    assert engine.active_node is None
    assert engine.available_nodes() == []
    engine.recompute()
    assert _available(graph) == set()


def test_topic_unlocks_relations_and_first_child_only(course_items):
    graph, _ = build_graph(course_items, 800)
    ProgressionEngine(graph, "a")
    assert _available(graph) == {"a", "b", "a1"}


def test_subsection_unlocks_parent_and_next_sibling(course_items):
    graph, _ = build_graph(course_items, 800)
    engine = ProgressionEngine(graph, "a")
    engine.activate("a1")
    # relations of a1 are its siblings
    assert _available(graph) == {"a1", "a2", "a3", "a"}


def test_last_subsection_has_no_next_sibling(course_items):
    graph, _ = build_graph(course_items, 800)
    engine = ProgressionEngine(graph, "a")
    engine.activate("b")
    assert _available(graph) == {"b", "a", "b1"}
    engine.activate("b1")
    assert _available(graph) == {"b1", "b"}
    assert _active(graph) == ["b1"]


def test_at_most_one_active_after_each_activation(course_items):
    graph, _ = build_graph(course_items, 800)
    engine = ProgressionEngine(graph, "a")
    for uid in ["a1", "a2", "b1", "b", "a"]:
        engine.activate(uid)
        assert _active(graph) == [uid]


def test_activate_unavailable_raises(course_items):
    graph, _ = build_graph(course_items, 800)
    engine = ProgressionEngine(graph, "a")
    with pytest.raises(ProgressionError):
        engine.activate("c")
    assert engine.active_id == "a"
    assert _available(graph) == {"a", "b", "a1"}


def test_activate_active_or_unknown_raises(course_items):
    graph, _ = build_graph(course_items, 800)
    engine = ProgressionEngine(graph, "a")
    with pytest.raises(ProgressionError):
        engine.activate("a")
    with pytest.raises(ProgressionError):
        engine.activate("nope")


def test_can_activate(scenario_items):
    graph, active_id = build_graph(scenario_items, 800)
    engine = ProgressionEngine(graph, active_id)
    assert engine.can_activate("s1")
    assert not engine.can_activate("t1")
    assert not engine.can_activate("s2")
    assert not engine.can_activate("zzz")


def test_transition_does_not_mutate_input(scenario_items):
    graph, active_id = build_graph(scenario_items, 800)
    ProgressionEngine(graph, active_id)
    before = {n.uid: (n.is_active, n.is_available) for n in graph}

    updated = transition(graph.nodes, "t1", "s1")

    assert {n.uid: (n.is_active, n.is_available) for n in graph} == before
    assert updated["s1"].is_active and not updated["t1"].is_active
    assert {uid for uid, n in updated.items() if n.is_available} == {"s1", "t1", "s2"}


def test_left_node_availability_follows_recompute(course_items):
    graph, _ = build_graph(course_items, 800)
    ProgressionEngine(graph, "a")
    graph_nodes = dict(graph.nodes)
    updated = transition(graph_nodes, "a", "b")
    assert updated["a"].is_available  # a is in b.relations
    updated = transition(updated, "b", "b1")
    assert not updated["a"].is_available
    assert updated["b"].is_available


def test_available_ids_is_deterministic(course_items):
    graph, _ = build_graph(course_items, 800)
    first = available_ids(graph.nodes, "a2")
    second = available_ids(graph.nodes, "a2")
    assert first == second == {"a2", "b1", "missing", "a1", "a3", "a"}
    assert available_ids(graph.nodes, None) == set()
