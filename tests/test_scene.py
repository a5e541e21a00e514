import numpy as np

from undicht.scene import Scene


def test_add_group_is_idempotent():
    scene = Scene()
    first = scene.add_group("level")
    second = scene.add_group("level")
    assert first is second
    assert len(scene.groups) == 1
    assert scene.group("level") is first


def test_missing_group_yields_none():
    scene = Scene()
    assert scene.add_mesh("nowhere", "m") is None
    assert scene.add_material("nowhere", "m") is None
    assert scene.add_animation("nowhere", "a") is None
    assert scene.mesh("nowhere", "m") is None
    assert scene.material("nowhere", "m") is None
    assert scene.animation("nowhere", "a") is None
    assert scene.group("nowhere") is None


def test_resources_reachable_through_scene():
    scene = Scene()
    scene.add_group("level")
    mesh = scene.add_mesh("level", "floor")
    material = scene.add_material("level", "stone")
    animation = scene.add_animation("level", "idle")
    assert scene.mesh("level", "floor") is mesh
    assert scene.material("level", "stone") is material
    assert scene.animation("level", "idle") is animation
    assert scene.mesh("level", "ceiling") is None


def test_update_global_transformations_on_all_groups():
    scene = Scene()
    expected_a = np.diag([2.0, 2.0, 2.0, 1.0])
    expected_b = np.diag([3.0, 3.0, 3.0, 1.0])
    node_a = scene.add_group("a").root_node.add_child_node("n")
    node_a.local_transformation = expected_a.copy()
    node_b = scene.add_group("b").root_node.add_child_node("n")
    node_b.local_transformation = expected_b.copy()
    scene.update_global_transformations()
    np.testing.assert_allclose(node_a.global_transformation, expected_a)
    np.testing.assert_allclose(node_b.global_transformation, expected_b)


def test_update_bone_matrices_and_animations():
    scene = Scene()
    group = scene.add_group("character")
    skeleton = group.add_skeleton("rig")
    skeleton.root_bone.name = "spine"
    animation = scene.add_animation("character", "wave")
    animation.duration = 4.0
    animation.ticks_per_second = 2.0
    track = animation.add_node_animation("spine")
    track.add_position_key(0.0, (0.0, 0.0, 0.0))
    track.add_position_key(4.0, (0.0, 4.0, 0.0))
    scene.update_animations(1.0)
    scene.update_bone_matrices()
    bone = skeleton.root_bone
    np.testing.assert_allclose(bone.local_matrix, track.transform_matrix(2.0))
    np.testing.assert_allclose(bone.global_matrix, bone.local_matrix)


def test_clean_up_empties_groups():
    scene = Scene()
    scene.add_group("g")
    scene.add_mesh("g", "m")
    scene.clean_up()
    assert scene.group("g").meshes == []