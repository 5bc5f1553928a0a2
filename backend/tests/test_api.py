def _insert(client, **payload):
    return client.post("/workflow/insert", json=payload)


def test_workflow_state(client):
    response = client.get("/workflow/")
    assert response.status_code == 200
    body = response.json()
    assert body["root"] == "n1"
    assert body["nodes"]["n1"]["kind"] == "start"
    assert body["can_undo"] is False
    assert body["can_redo"] is False


def test_insert_and_tree(client):
    response = _insert(client, parent_id="n1", kind="branch", label="Approved?")
    assert response.status_code == 200
    assert response.json()["ok"] is True

    _insert(client, parent_id="n2", kind="end", branch_key="false")

    tree = client.get("/workflow/tree").json()["entries"]
    assert [(e["id"], e["depth"], e["slot"]) for e in tree] == [
        ("n1", 0, None),
        ("n2", 1, "next"),
        ("n3", 2, "false"),
    ]
    assert tree[1]["open_slots"] == ["true"]
    assert tree[2]["open_slots"] == []


def test_error_status_mapping(client):
    _insert(client, parent_id="n1", kind="action")

    occupied = _insert(client, parent_id="n1", kind="end")
    assert occupied.status_code == 409
    body = occupied.json()
    assert body["ok"] is False
    assert body["error"]["kind"] == "SlotOccupied"
    assert body["error"]["advisory"] is False
    assert body["workflow"]["nodes"]["n1"]["children"] == {"next": "n2"}

    assert _insert(client, parent_id="missing", kind="end").status_code == 404
    assert _insert(client, parent_id="n2", kind="loop").status_code == 422
    _insert(client, parent_id="n2", kind="branch")
    assert _insert(
        client, parent_id="n3", kind="end", branch_key="maybe"
    ).status_code == 422

    root_delete = client.post("/workflow/delete", json={"node_id": "n1"})
    assert root_delete.status_code == 409
    assert root_delete.json()["error"]["kind"] == "CannotDeleteRoot"


def test_undo_redo_endpoints(client):
    empty = client.post("/workflow/undo")
    assert empty.status_code == 200
    assert empty.json()["ok"] is False
    assert empty.json()["error"]["kind"] == "NothingToUndo"
    assert empty.json()["error"]["advisory"] is True

    _insert(client, parent_id="n1", kind="action")
    client.post("/workflow/relabel", json={"node_id": "n2", "label": "Charge card"})

    undone = client.post("/workflow/undo").json()
    assert undone["ok"] is True
    assert undone["workflow"]["nodes"]["n2"]["label"] == "ACTION"
    assert undone["workflow"]["can_redo"] is True

    redone = client.post("/workflow/redo").json()
    assert redone["workflow"]["nodes"]["n2"]["label"] == "Charge card"
    assert redone["workflow"]["can_redo"] is False


def test_delete_and_save(client):
    _insert(client, parent_id="n1", kind="action")
    _insert(client, parent_id="n2", kind="end")

    deleted = client.post("/workflow/delete", json={"node_id": "n2"}).json()
    assert deleted["ok"] is True
    assert deleted["workflow"]["nodes"]["n1"]["children"] == {"next": "n3"}

    saved = client.post("/workflow/save")
    assert saved.status_code == 200
    body = saved.json()
    assert body["save_count"] == 1
    assert set(body["export"]["nodes"]) == {"n1", "n3"}
