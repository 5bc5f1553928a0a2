import pytest

from flowgraph.config import FactoryConfig
from flowgraph.errors import (
    CannotDeleteRoot,
    DanglingReference,
    InvalidBranchKey,
    InvalidKind,
    NodeNotFound,
)
from flowgraph.graph import (
    GraphStore,
    NodeFactory,
    NodeKind,
    SequentialIdentifierSource,
    UUIDIdentifierSource,
)
from flowgraph.graph.graph_schema import parse_branch_key


def test_identifier_sources():
    seq = SequentialIdentifierSource(prefix="x", start=5)
    assert [seq.next(), seq.next()] == ["x5", "x6"]

    short = UUIDIdentifierSource(length=10)
    ids = {short.next() for _ in range(200)}
    assert len(ids) == 200
    assert all(len(i) == 10 for i in ids)

    with pytest.raises(ValueError):
        UUIDIdentifierSource(length=4)


def test_factory_builds_kind_specific_slots(factory):
    branch = factory.create("branch")
    assert branch.children == {"true": None, "false": None}
    assert branch.label == "BRANCH"

    action = factory.create(NodeKind.ACTION, "Send mail")
    assert action.children == {"next": None}
    assert action.label == "Send mail"

    end = factory.create("END")
    assert end.children == {}
    assert end.kind is NodeKind.END

    assert factory.create("start").label == "Start"


def test_factory_rejects_unknown_kind(factory):
    with pytest.raises(InvalidKind):
        factory.create("loop")
    with pytest.raises(InvalidKind):
        factory.create(3)


def test_factory_label_overrides():
    factory = NodeFactory(
        ids=SequentialIdentifierSource(),
        config=FactoryConfig(default_labels={"action": "Do something"}),
    )
    assert factory.create("action").label == "Do something"
    assert factory.create("start").label == "START"


def test_parse_branch_key():
    assert parse_branch_key(True) == "true"
    assert parse_branch_key(False) == "false"
    assert parse_branch_key(" FALSE ") == "false"
    with pytest.raises(InvalidBranchKey):
        parse_branch_key("maybe")
    with pytest.raises(InvalidBranchKey):
        parse_branch_key(None)


def test_store_rejects_dangling_children_and_second_start(factory, store):
    action = factory.create("action")
    end = factory.create("end")

    with pytest.raises(DanglingReference):
        store.put_node(action.with_child("next", end.id))
    assert not store.has_node(action.id)

    with pytest.raises(InvalidKind):
        store.put_node(factory.create("start"))

    with pytest.raises(InvalidKind):
        GraphStore.with_root(action)


def test_store_edges_follow_slots(factory, store):
    branch = factory.create("branch")
    yes = factory.create("action")
    no = factory.create("end")

    store.put_node(yes)
    store.put_node(no)
    store.put_node(branch.with_child("true", yes.id).with_child("false", no.id))
    store.put_node(store.root.with_child("next", branch.id))

    assert store.edge_count() == 3
    assert store.parent_of(yes.id) == (branch.id, "true")
    assert store.parent_of(no.id) == (branch.id, "false")
    assert store.parent_of(store.root_id) is None
    assert store.validate() == []

    order = [(depth, slot, node.id) for depth, slot, node in store.walk()]
    assert order == [
        (0, None, store.root_id),
        (1, "next", branch.id),
        (2, "true", yes.id),
        (2, "false", no.id),
    ]


def test_store_remove_node_guards(factory, store):
    action = factory.create("action")
    store.put_node(action)
    store.put_node(store.root.with_child("next", action.id))

    with pytest.raises(CannotDeleteRoot):
        store.remove_node(store.root_id)
    with pytest.raises(DanglingReference):
        store.remove_node(action.id)
    with pytest.raises(NodeNotFound):
        store.remove_node("missing")


def test_clone_is_independent(factory, store):
    copy = store.clone()
    action = factory.create("action")
    copy.put_node(action)
    copy.put_node(copy.root.with_child("next", action.id))

    assert store.node_count() == 1
    assert store.root.child is None
    assert copy != store
    assert store.clone() == store


def test_validate_reports_shared_child(factory, store):
    a = factory.create("action")
    b = factory.create("branch")
    store.put_node(a)
    store.put_node(b.with_child("true", a.id))
    store.put_node(store.root.with_child("next", a.id))

    errors = store.validate()
    assert any("2 parents" in e for e in errors)


def test_to_dict_export(factory, store):
    action = factory.create("action", "Notify")
    store.put_node(action)
    store.put_node(store.root.with_child("next", action.id))

    exported = store.to_dict()
    assert exported["root"] == store.root_id
    assert list(exported["nodes"]) == [store.root_id, action.id]
    assert exported["nodes"][action.id] == {
        "id": action.id,
        "kind": "action",
        "label": "Notify",
        "children": {"next": None},
    }


def test_node_children_are_read_only(factory, store):
    branch = factory.create("branch")
    with pytest.raises(TypeError):
        branch.children["true"] = "elsewhere"

    snapshot = store.clone()
    with pytest.raises(TypeError):
        store.root.children["next"] = "n99"
    assert snapshot.root.children == {"next": None}

    relinked = branch.with_child("true", "n7")
    assert relinked.children == {"true": "n7", "false": None}
    assert branch.children == {"true": None, "false": None}
