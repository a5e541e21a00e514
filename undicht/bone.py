"""Bones of a skeletal hierarchy and the per-mesh bone records."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _identity() -> np.ndarray:
    return np.identity(4, dtype=float)


def _as_matrix(matrix) -> np.ndarray:
    array = np.array(matrix, dtype=float)
    if array.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {array.shape}")
    return array


@dataclass(eq=False)
class MeshBone:
    """A bone as referenced by a mesh.

    ``offset_matrix`` transforms from mesh space to bone space in bind pose
    (the inverse bind matrix).
    """

    name: str = ""
    offset_matrix: np.ndarray = field(default_factory=_identity)


@dataclass(eq=False)
class Bone:
    """A joint used in skeletal animation.

    The "global" coordinate system is the model's base coordinate system.
    """

    name: str = ""
    # global system seen from the bone system in bind pose
    offset_matrix: np.ndarray = field(default_factory=_identity)
    # local system relative to the parent system
    local_matrix: np.ndarray = field(default_factory=_identity)
    # local transformation stored for the bind pose
    local_matrix_bind: np.ndarray = field(default_factory=_identity)
    # local system relative to the global system
    global_matrix: np.ndarray = field(default_factory=_identity)
    # transformation from bind pose to the current pose
    bone_matrix: np.ndarray = field(default_factory=_identity)
    children: list[Bone] = field(default_factory=list)

    def update_global_matrix(self, parent_transf, recursive=True) -> None:
        """Recompute the global and bone matrices, optionally for all children."""
        self.global_matrix = _as_matrix(parent_transf) @ self.local_matrix
        self.bone_matrix = self.global_matrix @ self.offset_matrix
        if recursive:
            for child in self.children:
                child.update_global_matrix(self.global_matrix)

    def store_bind_pose(self, recursive=True) -> None:
        """Store the current pose as bind pose; update the global matrix first."""
        self.offset_matrix = np.linalg.inv(self.global_matrix)
        self.local_matrix_bind = self.local_matrix.copy()
        if recursive:
            for child in self.children:
                child.store_bind_pose()

    def restore_bind_pose(self, recursive=True) -> None:
        """Return the bone (and optionally its children) to the bind pose."""
        self.global_matrix = np.linalg.inv(self.offset_matrix)
        self.local_matrix = self.local_matrix_bind.copy()
        if recursive:
            for child in self.children:
                child.restore_bind_pose()

    def _direct_child(self, name: str) -> Bone | None:
        return next((child for child in self.children if child.name == name), None)

    def add_child_bone(self, name) -> Bone:
        """Add a child bone; an existing child with that name is returned instead."""
        existing = self._direct_child(name)
        if existing is not None:
            return existing
        bone = Bone(name=name)
        self.children.append(bone)
        return bone

    def find_child_bone(self, name, search_recursive=True) -> Bone | None:
        """Find a child bone by name, searching descendants if requested."""
        found = self._direct_child(name)
        if found is not None:
            return found
        if search_recursive:
            for child in self.children:
                found = child.find_child_bone(name)
                if found is not None:
                    return found
        return None

    def remove_child_bone(self, name) -> bool:
        """Remove a direct child by name; False if there was none."""
        child = self._direct_child(name)
        if child is None:
            return False
        self.children.remove(child)
        return True