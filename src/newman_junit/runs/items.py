from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Iterator, Iterable

SEP = " / "

@dataclass(eq=False)
class CollectionItem:
    id: str
    name: Optional[str] = None
    parent: Optional["CollectionItem"] = field(default=None, repr=False)
    children: List["CollectionItem"] = field(default_factory=list, repr=False)

    @property
    def label(self) -> str:
        return self.name or self.id

    def has_parent(self) -> bool:
        return self.parent is not None

    def ancestors(self) -> List["CollectionItem"]:
        """Ancestors ordered from the collection root down to the immediate parent."""
        chain: List[CollectionItem] = []
        node = self.parent
        while node is not None:
            chain.insert(0, node)
            node = node.parent
        return chain

    def add(self, child: "CollectionItem") -> "CollectionItem":
        child.parent = self
        self.children.append(child)
        return child

class ItemTree:
    """Read-only view over a collection's folder/request hierarchy."""

    def __init__(self, root: CollectionItem):
        self.root = root

    def items(self) -> Iterator[CollectionItem]:
        # depth-first, the collection root itself is not an item
        stack = list(reversed(self.root.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, item_id: str) -> Optional[CollectionItem]:
        if self.root.id == item_id:
            return self.root
        for item in self.items():
            if item.id == item_id:
                return item
        return None

    @staticmethod
    def full_name(item: CollectionItem, separator: str = SEP) -> str:
        if not item.has_parent():  # the collection root is named by itself only
            return item.label
        return separator.join([a.label for a in item.ancestors()] + [item.label])

    @classmethod
    def from_dicts(cls, root_id: str, root_name: Optional[str], items: Iterable[Dict[str, Any]]) -> "ItemTree":
        """Build a tree from nested ``{"id", "name", "item": [...]}`` mappings."""
        root = CollectionItem(root_id, root_name)
        def attach(parent: CollectionItem, nodes: Iterable[Dict[str, Any]]) -> None:
            for n in nodes or ():
                child = parent.add(CollectionItem(str(n.get("id") or n.get("name") or ""), n.get("name")))
                attach(child, n.get("item") or ())
        attach(root, items)
        return cls(root)
