"""Nodes of a scene hierarchy, each referencing at most one mesh."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

logger = logging.getLogger(__name__)

MAX_BONES_PER_NODE = 100


def _identity() -> np.ndarray:
    return np.identity(4, dtype=float)


def format_matrix(matrix) -> str:
    """Render a 4x4 matrix row by row, two significant digits per entry."""
    array = np.asarray(matrix, dtype=float)
    return "".join(
        "".join(f"{value:8.2g} " for value in row) + "\n" for row in array
    )


@dataclass(eq=False)
class Node:
    """A node of the scene hierarchy with a local and a global transformation."""

    name: str = ""
    mesh: str = ""
    children: list[Node] = field(default_factory=list)
    # local coordinate system relative to the parent
    local_transformation: np.ndarray = field(default_factory=_identity)
    # local coordinate system relative to the global system
    global_transformation: np.ndarray = field(default_factory=_identity)
    # whether the node holds per-node uniform data (model and bone matrices)
    has_uniforms: bool = False
    _mesh_id: int | None = field(default=None, init=False, repr=False)

    @property
    def child_node_count(self) -> int:
        return len(self.children)

    def add_child_node(self, node_name) -> Node:
        """Add a direct child; an existing child with that name is returned instead."""
        existing = self.child_node(node_name)
        if existing is not None:
            return existing
        node = Node(name=node_name)
        self.children.append(node)
        return node

    def child_node(self, node_name, search_recursive=False) -> Node | None:
        """Find a child by name, searching all descendants if requested."""
        found = next((c for c in self.children if c.name == node_name), None)
        if found is not None or not search_recursive:
            return found
        for child in self.children:
            found = child.child_node(node_name, search_recursive)
            if found is not None:
                return found
        return None

    def clear_child_nodes(self) -> None:
        for child in self.children:
            child.clean_up()
        self.children.clear()

    def clean_up(self) -> None:
        self.clear_child_nodes()

    def add_meshes(self, meshes) -> None:
        """Add each mesh as a child node carrying uniform data."""
        for mesh in meshes:
            child = self.add_child_node(f"mesh child {len(self.children)}")
            child.has_uniforms = True
            child.mesh = mesh

    def mesh_of(self, group):
        """The node's mesh in ``group``, or None; the mesh id is looked up once."""
        if self._mesh_id is None:
            self._mesh_id = group.mesh_id(self.mesh)
        if self._mesh_id is None:
            return None
        return group.mesh(self._mesh_id)

    def update_global_transformation(self, parent_transformation) -> None:
        """Recompute the global transformation of this node and all descendants."""
        parent = np.asarray(parent_transformation, dtype=float)
        self.global_transformation = parent @ self.local_transformation
        for child in self.children:
            child.update_global_transformation(self.global_transformation)

    def uniform_matrices(self, group) -> Iterator[tuple[Node, list[np.ndarray]]]:
        """Yield ``(node, matrices)`` for every node with uniform data and a mesh.

        Children come before their parent. The matrices are the model matrix
        followed by at most ``MAX_BONES_PER_NODE`` bone matrices of the mesh's bones.
        """
        for child in self.children:
            yield from child.uniform_matrices(group)

        if not self.has_uniforms:
            return
        mesh = group.mesh(self.mesh)
        if mesh is None:
            return

        bone_matrices = []
        for bone_name in mesh.bones:
            bone = group.bone(bone_name)
            if bone is None:
                logger.error("failed to update bone: %s", bone_name)
            else:
                bone_matrices.append(bone.bone_matrix)

        if len(bone_matrices) > MAX_BONES_PER_NODE:
            logger.warning(
                "provided number of Bone Matrices cant be stored, expect animation glitches"
            )

        yield self, [self.global_transformation, *bone_matrices[:MAX_BONES_PER_NODE]]