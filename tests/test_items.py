from newman_junit.runs.items import CollectionItem, ItemTree


def test_full_name_joins_ancestors_and_item(tree: ItemTree) -> None:
    item = tree.find("r1")
    assert [a.id for a in item.ancestors()] == ["c1", "f1"]
    assert ItemTree.full_name(item) == "API / Users / Get user"
    assert ItemTree.full_name(item, "::") == "API::Users::Get user"


def test_full_name_falls_back_to_id(tree: ItemTree) -> None:
    assert ItemTree.full_name(tree.find("r3")) == "API / r3"


def test_root_is_named_by_itself_only() -> None:
    root = CollectionItem("c9", "Solo")
    assert not root.has_parent()
    assert ItemTree.full_name(root) == "Solo"
    assert ItemTree.full_name(CollectionItem("c9")) == "c9"


def test_items_are_depth_first_without_root(tree: ItemTree) -> None:
    assert [i.id for i in tree.items()] == ["f1", "r1", "r2", "r3"]


def test_find(tree: ItemTree) -> None:
    assert tree.find("r2").name == "Create user"
    assert tree.find("c1") is tree.root
    assert tree.find("missing") is None


def test_from_dicts_builds_nested_tree() -> None:
    t = ItemTree.from_dicts("c1", "API", [
        {"id": "f1", "name": "Folder", "item": [{"id": "r1", "name": "Req"}]},
        {"name": "Loose"},
    ])
    assert ItemTree.full_name(t.find("r1")) == "API / Folder / Req"
    assert t.find("Loose").parent is t.root
