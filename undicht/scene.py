"""A scene made of named scene groups."""

from __future__ import annotations

from dataclasses import dataclass, field

from undicht.animation import Animation
from undicht.material import Material
from undicht.mesh import Mesh
from undicht.scene_group import SceneGroup


@dataclass(eq=False)
class Scene:
    """A collection of scene groups addressed by name."""

    groups: list[SceneGroup] = field(default_factory=list)

    def clean_up(self) -> None:
        for group in self.groups:
            group.clean_up()

    def add_group(self, group_name) -> SceneGroup:
        """Add a group; an existing group with that name is returned instead."""
        existing = self.group(group_name)
        if existing is not None:
            return existing
        group = SceneGroup(name=group_name)
        self.groups.append(group)
        return group

    def add_mesh(self, group_name, mesh_name) -> Mesh | None:
        """Add a mesh to the named group; None if the group does not exist."""
        group = self.group(group_name)
        return None if group is None else group.add_mesh(mesh_name)

    def add_material(self, group_name, mat_name) -> Material | None:
        group = self.group(group_name)
        return None if group is None else group.add_material(mat_name)

    def add_animation(self, group_name, anim_name) -> Animation | None:
        group = self.group(group_name)
        return None if group is None else group.add_animation(anim_name)

    def group(self, group_name) -> SceneGroup | None:
        return next((g for g in self.groups if g.name == group_name), None)

    def mesh(self, group_name, mesh_name) -> Mesh | None:
        group = self.group(group_name)
        return None if group is None else group.mesh(mesh_name)

    def material(self, group_name, mat_name) -> Material | None:
        group = self.group(group_name)
        return None if group is None else group.material(mat_name)

    def animation(self, group_name, anim_name) -> Animation | None:
        group = self.group(group_name)
        return None if group is None else group.animation(anim_name)

    def mip_chains(self) -> list[list[tuple[int, int]]]:
        """Mip sizes of every material's diffuse texture across all groups."""
        return [chain for group in self.groups for chain in group.mip_chains()]

    def node_uniforms(self) -> list:
        """Node uniform matrices of all groups."""
        return [entry for group in self.groups for entry in group.node_uniforms()]

    def update_bone_matrices(self) -> None:
        for group in self.groups:
            group.update_bone_matrices()

    def update_global_transformations(self) -> None:
        for group in self.groups:
            group.update_global_transformations()

    def update_animations(self, time) -> None:
        for group in self.groups:
            group.update_animations(time)