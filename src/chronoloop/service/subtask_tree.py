# SPDX-License-Identifier: MIT

from typing import Optional

from chronoloop.model.entity_id import EntityId, generate_entity_id
from chronoloop.model.subtask import Subtask


class SubtaskNode:
    def __init__(
        self,
        id: EntityId,
        title: str,
        completed: bool = False,
        parent: Optional["SubtaskNode"] = None,
    ) -> None:
        self.id = id
        self.title = title
        self.completed = completed
        self.parent = parent
        self.children: list["SubtaskNode"] = []

    def walk(self) -> list["SubtaskNode"]:
        nodes = [self]
        for child in self.children:
            nodes += child.walk()
        return nodes


class SubtaskTree:
    """
    Arbitrarily nested subtasks with a flat id index.

    Nodes own their children; the index maps every id to its node so that
    lookups and toggles never walk the tree.
    """

    def __init__(self, subtasks: Optional[list[Subtask]] = None) -> None:
        self.roots: list[SubtaskNode] = []
        self._index: dict[EntityId, SubtaskNode] = {}
        for subtask in subtasks or []:
            self.roots.append(self.__build(subtask, None))

    def __build(self, subtask: Subtask, parent: Optional[SubtaskNode]) -> SubtaskNode:
        node = SubtaskNode(
            subtask["id"], subtask["title"], subtask.get("completed", False), parent
        )
        self._index[node.id] = node
        for child in subtask.get("subtasks") or []:
            node.children.append(self.__build(child, node))
        return node

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, id: object) -> bool:
        return id in self._index

    def get(self, id: EntityId) -> SubtaskNode:
        return self._index[id]

    def parent_of(self, id: EntityId) -> Optional[SubtaskNode]:
        return self._index[id].parent

    def toggle(self, id: EntityId) -> bool:
        node = self._index[id]
        node.completed = not node.completed
        return node.completed

    def add(
        self,
        title: str,
        parent_id: Optional[EntityId] = None,
        id: Optional[EntityId] = None,
    ) -> SubtaskNode:
        parent = self._index[parent_id] if parent_id is not None else None
        node = SubtaskNode(id or generate_entity_id(), title, False, parent)
        if node.id in self._index:
            raise ValueError(f"subtask id {node.id} already exists")
        if parent is None:
            self.roots.append(node)
        else:
            parent.children.append(node)
        self._index[node.id] = node
        return node

    def remove(self, id: EntityId) -> None:
        node = self._index[id]
        siblings = node.parent.children if node.parent is not None else self.roots
        siblings.remove(node)
        for removed in node.walk():
            del self._index[removed.id]

    def completion_ratio(self) -> float:
        if not self._index:
            return 0.0
        completed = sum(1 for node in self._index.values() if node.completed)
        return completed / len(self._index)

    def to_subtasks(self) -> list[Subtask]:
        return [self.__serialize(node) for node in self.roots]

    def __serialize(self, node: SubtaskNode) -> Subtask:
        return {
            "id": node.id,
            "title": node.title,
            "completed": node.completed,
            "subtasks": [self.__serialize(child) for child in node.children],
        }
