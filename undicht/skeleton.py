"""A named bone hierarchy used for skeletal animation."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from undicht.bone import Bone


@dataclass(eq=False)
class Skeleton:
    """Stores a bone hierarchy and computes the bone transformations."""

    name: str = ""
    root_bone: Bone = field(default_factory=Bone)

    def find_bone(self, bone_name) -> Bone | None:
        """Find a bone anywhere in the hierarchy, including the root."""
        if self.root_bone.name == bone_name:
            return self.root_bone
        return self.root_bone.find_child_bone(bone_name, True)

    def bone_matrix(self, bone_name) -> np.ndarray:
        """Global matrix of the named bone, or of the root if it is unknown."""
        bone = self.find_bone(bone_name)
        if bone is None:
            return self.root_bone.global_matrix
        return bone.global_matrix

    def update_bone_matrices(self) -> None:
        self.root_bone.update_global_matrix(np.identity(4), True)

    def store_bind_pose(self) -> None:
        """Store the current pose as bind pose; update the matrices first."""
        self.root_bone.store_bind_pose(True)

    def restore_bind_pose(self) -> None:
        self.root_bone.restore_bind_pose(True)