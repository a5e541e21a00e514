# undicht

The CPU side of a small real-time 3D renderer. It provides a scene graph,
skeletal animation with keyframe interpolation, and the bookkeeping for
meshes, materials, textures and descriptor sets. All matrices are 4×4
`numpy` arrays.

## Installation

```
pip install .
```

To run the tests with `pytest`, install with `pip install .[test]`.

## Modules

- `undicht.scene`: `Scene` holds named `SceneGroup`s. It has `add_group`
  (which returns the existing group if the name is taken), `add_mesh`,
  `add_material` and `add_animation`. It also has lookups by group and
  resource name, and updates that run over all groups.
- `undicht.scene_group`: `SceneGroup` owns meshes, materials, animations,
  skeletons and a `root_node`. Resources can be looked up by name or by id
  (`mesh`, `material`, `animation`, `skeleton`, `mesh_id`, ...). `bone` finds
  a bone across all skeletons. `node_uniforms` collects, for every node that
  holds uniform data, its model matrix followed by its mesh's bone matrices.
- `undicht.node`: `Node` forms the hierarchy. `update_global_transformation`
  combines the parent and local transformations down the tree. `add_meshes`
  adds one child node for each mesh. `uniform_matrices` yields model and bone
  matrices, with at most `MAX_BONES_PER_NODE` bone matrices per node.
  `format_matrix` renders a matrix as text.
- `undicht.mesh`: `Mesh` stores raw vertex and index bytes, vertex attribute
  flags, a material name and bone names. `bone_id` returns `None` for an
  unknown bone. `bone` raises `IndexError` when the id is out of range.
- `undicht.skeleton` and `undicht.bone`: `Skeleton` wraps a tree of `Bone`s.
  - `update_bone_matrices` computes each bone's `global_matrix` and
    `bone_matrix`.
  - `store_bind_pose` and `restore_bind_pose` save and restore the rest pose.
  - `bone_matrix(name)` returns the named bone's global matrix. If the bone
    is not found, it returns the root's global matrix.
  - `MeshBone` records a bone name and its offset matrix.
- `undicht.animation` and `undicht.node_animation`: an `Animation` has one
  `NodeAnimation` track per bone.
  - `Animation.update(time, group)` repeats the animation and sets the
    bones' local matrices. `duration` is in ticks and `time` is in seconds.
    A zero `duration` or zero `ticks_per_second` raises `ValueError`.
  - Positions are interpolated linearly and rotations with `slerp`.
    Quaternions are `(w, x, y, z)`.
  - Scale keys are stored, but `scale` always evaluates to one.
    `transform_matrix` is translation times rotation.
- `undicht.texture` and `undicht.material`: a `Material` owns `Texture`s,
  each tagged with a `TextureType`.
  - `Texture.set_data` stores one byte per channel. It raises `ValueError`
    for non-positive sizes or too little data.
  - `mip_level_count` and `Texture.mip_sizes` describe the mip chain.
- `undicht.descriptor_cache`: `DescriptorSetCache` hands out reusable
  `DescriptorSet`s in numbered groups. `reset(group)` makes that group's sets
  available for reuse.

## Example

```python
from undicht.scene import Scene
from undicht.node_animation import translation_matrix

scene = Scene()
group = scene.add_group("character")

skeleton = group.add_skeleton("rig")
skeleton.root_bone.name = "hips"
spine = skeleton.root_bone.add_child_bone("spine")
spine.local_matrix = translation_matrix([0.0, 1.0, 0.0])

anim = scene.add_animation("character", "walk")
anim.duration = 10.0          # in ticks
anim.ticks_per_second = 5.0
track = anim.add_node_animation("spine")
track.add_position_key(0.0, [0.0, 0.0, 0.0])
track.add_position_key(10.0, [0.0, 2.0, 0.0])

scene.update_animations(1.0)  # seconds: halfway, spine moves to y = 1
scene.update_bone_matrices()
print(skeleton.bone_matrix("spine"))
```

Lookups by name return `None` when nothing matches. Adding a child node, a
child bone, a group or a node track whose name is already used returns the
existing one.

## What it does not do

This package does no drawing and talks to no graphics device. Vertex, index
and texture data are kept as plain bytes, and mip chains are only computed
as sizes. Uniform data is collected as lists of matrices for the caller to
upload. Model files are not loaded either: scenes are built in code.