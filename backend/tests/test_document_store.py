from app.services.document_store import DocumentStore


def test_add_generates_id_and_get_round_trips(db):
    store = DocumentStore(db)
    doc = store.add("notices", {"title": "안내", "type": "공지"})
    assert doc["id"]
    assert store.get("notices", doc["id"]) == doc
    assert store.exists("notices", doc["id"])


def test_collections_are_isolated(db):
    store = DocumentStore(db)
    store.set("a", "same", {"v": 1})
    store.set("b", "same", {"v": 2})
    assert store.get("a", "same")["v"] == 1
    assert store.get("b", "same")["v"] == 2
    assert [d["id"] for d in store.list("a")] == ["same"]


def test_set_overwrites_unless_merge(db):
    store = DocumentStore(db)
    store.set("settings", "main", {"mainImage": "x", "snsLinks": []})
    store.set("settings", "main", {"snsLinks": [1]}, merge=True)
    assert store.get("settings", "main") == {"id": "main", "mainImage": "x", "snsLinks": [1]}

    store.set("settings", "main", {"snsLinks": []})
    assert store.get("settings", "main") == {"id": "main", "snsLinks": []}


def test_update_missing_returns_none(db):
    store = DocumentStore(db)
    assert store.update("albums", "missing", {"title": "x"}) is None
    assert not store.exists("albums", "missing")


def test_list_orders_by_field(db):
    store = DocumentStore(db)
    for date in ("2024-01-01", "2025-01-01", "2023-01-01"):
        store.add("albums", {"date": date})
    assert [d["date"] for d in store.list("albums", order_by="date")] == ["2025-01-01", "2024-01-01", "2023-01-01"]
    assert [d["date"] for d in store.list("albums", order_by="date", descending=False)] == [
        "2023-01-01",
        "2024-01-01",
        "2025-01-01",
    ]


def test_delete(db):
    store = DocumentStore(db)
    doc = store.add("videos", {"title": "MV"})
    assert store.delete("videos", doc["id"]) is True
    assert store.get("videos", doc["id"]) is None
    assert store.delete("videos", doc["id"]) is False
