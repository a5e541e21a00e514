import pytest

from undicht.descriptor_cache import DescriptorSet, DescriptorSetCache


def test_allocate_creates_distinct_sets():
    cache = DescriptorSetCache()
    a = cache.allocate()
    b = cache.allocate()
    assert a is not b
    assert cache.allocated_sets == [a, b]
    assert cache.in_use(0) == 2


def test_reset_recycles_sets_last_first():
    cache = DescriptorSetCache()
    a = cache.allocate()
    b = cache.allocate()
    cache.reset()
    assert cache.in_use(0) == 0
    assert cache.allocate() is b
    assert cache.allocate() is a
    assert len(cache.allocated_sets) == 2


def test_groups_are_reset_independently():
    cache = DescriptorSetCache()
    first = cache.allocate(0)
    second = cache.allocate(2)
    cache.reset(2)
    assert cache.in_use(0) == 1
    assert cache.in_use(2) == 0
    reused = cache.allocate(1)
    assert reused is second
    assert reused is not first


def test_reset_of_unknown_group_changes_nothing():
    cache = DescriptorSetCache()
    cache.allocate()
    cache.reset(5)
    assert cache.in_use(0) == 1
    assert cache.in_use(5) == 0


def test_negative_group_rejected():
    with pytest.raises(ValueError):
        DescriptorSetCache().allocate(-1)


def test_custom_factory_and_clean_up():
    created = []

    def factory():
        created.append(DescriptorSet())
        return created[-1]

    cache = DescriptorSetCache(factory)
    descriptor_set = cache.allocate()
    descriptor_set.bind(0, "ubo")
    assert descriptor_set is created[0]
    assert descriptor_set.bindings == {0: "ubo"}
    cache.clean_up()
    assert descriptor_set.bindings == {}
    assert cache.allocated_sets == []