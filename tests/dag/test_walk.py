"""Tests for graph traversal, validation and serialisation."""

import pytest
import yaml

from pipegen.dag import (
    CycleError,
    GraphError,
    Node,
    NodeKind,
    describe,
    dump_yaml,
    inputs_for,
    scoped_to_drone,
    validate,
    walk,
)


def _node(name: str, kind: NodeKind = NodeKind.BUILD) -> Node:
    return Node(name, kind)


class TestWalk:
    def test_inputs_come_before_dependents(self):
        src, mid, out = _node("src"), _node("mid"), _node("out")
        mid.add_input(src)
        out.add_input(mid)
        assert walk([out]) == [src, mid, out]

    def test_diamond_visits_shared_node_once(self):
        root, left, right, sink = (_node(n) for n in ("root", "left", "right", "sink"))
        left.add_input(root)
        right.add_input(root)
        sink.add_input(left, right)

        order = walk([sink])

        assert order == [root, left, right, sink]

    def test_multiple_outputs_share_upstream(self):
        root, a, b = _node("root"), _node("a"), _node("b")
        a.add_input(root)
        b.add_input(root)
        assert walk([a, b]) == [root, a, b]

    def test_cycle_detected(self):
        a, b = _node("a"), _node("b")
        a.add_input(b)
        b.add_input(a)
        with pytest.raises(CycleError) as excinfo:
            walk([a])
        assert excinfo.value.path == ["a", "b", "a"]

    def test_dangling_input_detected(self):
        a = _node("a")
        a.inputs.append(None)
        with pytest.raises(GraphError, match="dangling input"):
            walk([a])

    def test_long_chain_beyond_recursion_limit(self):
        nodes = [_node(f"n{i}") for i in range(5000)]
        for upstream, node in zip(nodes, nodes[1:]):
            node.add_input(upstream)
        assert walk([nodes[-1]]) == nodes

    def test_cycle_at_end_of_long_chain(self):
        nodes = [_node(f"n{i}") for i in range(3000)]
        for upstream, node in zip(nodes, nodes[1:]):
            node.add_input(upstream)
        nodes[0].add_input(nodes[-1])
        with pytest.raises(CycleError):
            walk([nodes[-1]])

    def test_dangling_output_detected(self):
        with pytest.raises(GraphError, match="<outputs>"):
            walk(["not a node"])

    def test_empty_outputs(self):
        assert walk([]) == []


class TestValidate:
    def test_returns_walk_order(self):
        a, b = _node("a"), _node("b")
        b.add_input(a)
        assert validate([b]) == [a, b]

    def test_duplicate_names_allowed(self):
        a1, a2, sink = _node("fhs"), _node("fhs"), _node("sink")
        sink.add_input(a1, a2)
        assert len(validate([sink])) == 3

    def test_shared_id_rejected(self):
        a, b, sink = _node("a"), _node("b"), _node("sink")
        b.id = a.id
        sink.add_input(a)
        sink.inputs.append(b)
        with pytest.raises(GraphError):
            validate([sink])


class TestInputsFor:
    def test_scoped_input_visible_to_its_renderer_only(self):
        tests = _node("unit-tests", NodeKind.UNIT_TESTS)
        build = _node("server")
        image = _node("image-server", NodeKind.IMAGE)
        wrapped = scoped_to_drone(tests)
        image.add_input(build, wrapped)

        assert inputs_for(image, "drone") == [build, wrapped]
        assert inputs_for(image, "makefile") == [build]


class TestSerialisation:
    def test_describe_is_in_dependency_order(self):
        a, b = _node("a"), _node("b")
        b.add_input(a)
        assert [d["name"] for d in describe([b])] == ["a", "b"]

    def test_dump_yaml_round_trips_structure(self):
        a, b = _node("a"), _node("b")
        b.add_input(a)

        data = yaml.safe_load(dump_yaml([b]))

        assert [n["name"] for n in data["nodes"]] == ["a", "b"]
        assert data["nodes"][1]["inputs"] == [a.id]
        assert data["nodes"][0]["kind"] == "build"
