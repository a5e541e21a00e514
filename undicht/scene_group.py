"""A group of meshes, materials, animations, skeletons and a node hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar

import numpy as np

from undicht.animation import Animation
from undicht.bone import Bone
from undicht.material import Material
from undicht.mesh import Mesh
from undicht.node import Node
from undicht.skeleton import Skeleton

_T = TypeVar("_T")


def _index_of(items: list, name: str) -> int | None:
    return next((i for i, item in enumerate(items) if item.name == name), None)


def _lookup(items: list[_T], key, find_id) -> _T | None:
    if isinstance(key, str):
        key = find_id(key)
        if key is None:
            return None
    if key is None or not 0 <= key < len(items):
        return None
    return items[key]


@dataclass(eq=False)
class SceneGroup:
    """Resources that belong together, structured like an imported model scene.

    Resources can be addressed by name or by id. An id stays valid until
    ``clean_up`` is called or the resource is removed.
    """

    name: str = ""
    meshes: list[Mesh] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)
    animations: list[Animation] = field(default_factory=list)
    skeletons: list[Skeleton] = field(default_factory=list)
    root_node: Node = field(default_factory=Node)

    def clean_up(self) -> None:
        """Release the node hierarchy, meshes, materials and animations."""
        self.root_node.clean_up()
        for mesh in self.meshes:
            mesh.clean_up()
        for material in self.materials:
            material.clean_up()
        self.meshes.clear()
        self.materials.clear()
        self.animations.clear()

    def add_mesh(self, mesh_name) -> Mesh:
        mesh = Mesh(name=mesh_name)
        self.meshes.append(mesh)
        return mesh

    def add_material(self, mat_name) -> Material:
        material = Material(name=mat_name)
        self.materials.append(material)
        return material

    def add_animation(self, anim_name) -> Animation:
        animation = Animation(name=anim_name)
        self.animations.append(animation)
        return animation

    def add_skeleton(self, skel_name) -> Skeleton:
        skeleton = Skeleton(name=skel_name)
        self.skeletons.append(skeleton)
        return skeleton

    def mesh_id(self, mesh_name) -> int | None:
        """Id of the named mesh, or None if there is none."""
        return _index_of(self.meshes, mesh_name)

    def material_id(self, mat_name) -> int | None:
        return _index_of(self.materials, mat_name)

    def animation_id(self, anim_name) -> int | None:
        return _index_of(self.animations, anim_name)

    def skeleton_id(self, skel_name) -> int | None:
        return _index_of(self.skeletons, skel_name)

    def mesh(self, key) -> Mesh | None:
        """The mesh with the given name or id, or None."""
        return _lookup(self.meshes, key, self.mesh_id)

    def material(self, key) -> Material | None:
        return _lookup(self.materials, key, self.material_id)

    def animation(self, key) -> Animation | None:
        return _lookup(self.animations, key, self.animation_id)

    def skeleton(self, key) -> Skeleton | None:
        return _lookup(self.skeletons, key, self.skeleton_id)

    def bone(self, bone_name) -> Bone | None:
        """The first bone of that name across all skeletons, or None."""
        for skeleton in self.skeletons:
            bone = skeleton.find_bone(bone_name)
            if bone is not None:
                return bone
        return None

    def mip_chains(self) -> list[list[tuple[int, int]]]:
        """Mip sizes of every material's diffuse texture."""
        return [material.mip_chains() for material in self.materials]

    def update_bone_matrices(self) -> None:
        for skeleton in self.skeletons:
            skeleton.update_bone_matrices()

    def update_global_transformations(self) -> None:
        self.root_node.update_global_transformation(np.identity(4))

    def update_animations(self, time) -> None:
        for animation in self.animations:
            animation.update(time, self)

    def node_uniforms(self) -> list[tuple[Node, list[np.ndarray]]]:
        """Model and bone matrices for every node that holds uniform data."""
        return list(self.root_node.uniform_matrices(self))