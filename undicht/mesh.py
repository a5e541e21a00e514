"""Meshes: vertex and index data plus the attributes describing them."""

from __future__ import annotations

from dataclasses import dataclass, field


def _to_bytes(data) -> bytes:
    return memoryview(data).tobytes()


@dataclass(eq=False)
class Mesh:
    """Vertices and the faces built from them.

    If present, the vertex attributes are always ordered as: position,
    texture coordinate, normal, tangent, bitangent (each three floats).
    """

    name: str = ""
    material: str = ""
    bones: list[str] = field(default_factory=list)
    vertex_count: int = 0
    has_positions: bool = False
    has_tex_coords: bool = False
    has_normals: bool = False
    # tangents and bitangents always come together
    has_tangents_bitangents: bool = False
    # used for skeletal animation
    has_bones: bool = False
    vertex_data: bytes = b""
    index_data: bytes = b""
    _material_id: int | None = field(default=None, init=False, repr=False)

    def set_vertex_data(self, data) -> None:
        """Store the raw vertex data (anything supporting the buffer protocol)."""
        self.vertex_data = _to_bytes(data)

    def set_index_data(self, data) -> None:
        """Store the raw index data (anything supporting the buffer protocol)."""
        self.index_data = _to_bytes(data)

    def set_vertex_attributes(
        self, has_positions, has_tex_coords, has_normals, has_tangents_bitangents, has_bones
    ) -> None:
        self.has_positions = bool(has_positions)
        self.has_tex_coords = bool(has_tex_coords)
        self.has_normals = bool(has_normals)
        self.has_tangents_bitangents = bool(has_tangents_bitangents)
        self.has_bones = bool(has_bones)

    def material_of(self, group):
        """The mesh's material in ``group``, or None if the group has no such material.

        The material's id is looked up once and remembered for later calls.
        """
        if self._material_id is None:
            self._material_id = group.material_id(self.material)
        if self._material_id is None:
            return None
        return group.material(self._material_id)

    def bone_id(self, bone_name) -> int | None:
        """Index of the named bone, or None if the mesh has no such bone."""
        return next((i for i, name in enumerate(self.bones) if name == bone_name), None)

    def bone(self, bone_id) -> str:
        """Name of the bone with the given index; raises IndexError if out of range."""
        if not 0 <= bone_id < len(self.bones):
            raise IndexError(f"bone id {bone_id} out of range")
        return self.bones[bone_id]

    def clean_up(self) -> None:
        """Release the vertex and index data."""
        self.vertex_data = b""
        self.index_data = b""