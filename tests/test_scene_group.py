import numpy as np
import pytest

from undicht.scene_group import SceneGroup
from undicht.texture import TextureType


@pytest.fixture
def group():
    g = SceneGroup(name="model")
    g.add_mesh("body")
    g.add_mesh("head")
    g.add_material("skin")
    g.add_animation("walk")
    g.add_skeleton("rig")
    return g


def test_mesh_by_name_and_id(group):
    head = group.mesh("head")
    assert head.name == "head"
    assert group.mesh(group.mesh_id("head")) is head
    assert group.mesh_id("body") == 0


def test_missing_resources_are_none(group):
    assert group.mesh("tail") is None
    assert group.mesh_id("tail") is None
    assert group.material("metal") is None
    assert group.animation(7) is None
    assert group.skeleton(-1) is None


def test_other_resources_by_name(group):
    assert group.material("skin") is group.materials[0]
    assert group.animation("walk") is group.animations[0]
    assert group.skeleton("rig") is group.skeletons[0]
    assert group.skeleton_id("rig") == 0


def test_bone_found_across_skeletons(group):
    group.skeletons[0].root_bone.name = "hip"
    other = group.add_skeleton("second")
    other.root_bone.name = "root"
    arm = other.root_bone.add_child_bone("arm")
    assert group.bone("arm") is arm
    assert group.bone("hip") is group.skeletons[0].root_bone
    assert group.bone("leg") is None


def test_mesh_material_lookup_through_group(group):
    mesh = group.mesh("body")
    mesh.material = "skin"
    assert mesh.material_of(group) is group.material("skin")


def test_update_animations_sets_bone_local_matrix(group):
    group.skeletons[0].root_bone.name = "arm"
    animation = group.animation("walk")
    animation.duration = 10.0
    animation.ticks_per_second = 1.0
    track = animation.add_node_animation("arm")
    track.add_position_key(0.0, (0.0, 0.0, 0.0))
    track.add_position_key(10.0, (10.0, 0.0, 0.0))
    group.update_animations(5.0)
    bone = group.bone("arm")
    np.testing.assert_allclose(bone.local_matrix, track.transform_matrix(5.0))


def test_update_bone_matrices(group):
    root = group.skeletons[0].root_bone
    root.local_matrix = np.diag([2.0, 2.0, 2.0, 1.0])
    child = root.add_child_bone("child")
    group.update_bone_matrices()
    np.testing.assert_allclose(child.global_matrix, root.local_matrix)


def test_update_global_transformations(group):
    child = group.root_node.add_child_node("child")
    child.local_transformation = np.diag([3.0, 3.0, 3.0, 1.0])
    group.update_global_transformations()
    np.testing.assert_allclose(child.global_transformation, child.local_transformation)


def test_node_uniforms_collects_model_and_bone_matrices(group):
    group.skeletons[0].root_bone.name = "arm"
    group.mesh("body").bones = ["arm"]
    group.root_node.add_meshes(["body"])
    group.update_bone_matrices()
    group.update_global_transformations()
    uniforms = group.node_uniforms()
    assert len(uniforms) == 1
    node, matrices = uniforms[0]
    assert node is group.root_node.children[0]
    assert len(matrices) == 2
    np.testing.assert_allclose(matrices[1], group.bone("arm").bone_matrix)


def test_mip_chains_per_material(group):
    texture = group.material("skin").add_texture(TextureType.DIFFUSE)
    texture.set_data(bytes(4 * 4 * 4), 4, 4, 4)
    chains = group.mip_chains()
    assert chains == [texture.mip_sizes()]


def test_clean_up_clears_resources(group):
    group.root_node.add_child_node("child")
    group.clean_up()
    assert group.meshes == []
    assert group.materials == []
    assert group.animations == []
    assert group.root_node.child_node_count == 0