"""Materials: a named set of textures."""

from __future__ import annotations

from dataclasses import dataclass, field

from undicht.texture import Texture, TextureType


@dataclass(eq=False)
class Material:
    """A named collection of textures describing a surface."""

    name: str = ""
    textures: list[Texture] = field(default_factory=list)

    def add_texture(self, texture_type) -> Texture:
        """Append a new, empty texture of the given type."""
        texture = Texture(type=TextureType(texture_type))
        self.textures.append(texture)
        return texture

    def texture(self, texture_type) -> Texture | None:
        """The first texture of the given type, or None if there is none."""
        wanted = TextureType(texture_type)
        return next((t for t in self.textures if t.type is wanted), None)

    def mip_chains(self) -> list[tuple[int, int]]:
        """Mip sizes of the diffuse texture, empty if it has no image."""
        diffuse = self.texture(TextureType.DIFFUSE)
        if diffuse is None or not diffuse.has_image:
            return []
        return diffuse.mip_sizes()

    def clean_up(self) -> None:
        for texture in self.textures:
            texture.clean_up()