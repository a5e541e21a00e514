"""Recycling of descriptor sets, tracked in groups."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DescriptorSet:
    """Resources bound to numbered binding slots."""

    bindings: dict[int, Any] = field(default_factory=dict)

    def bind(self, binding: int, resource: Any) -> None:
        self.bindings[binding] = resource

    def clean_up(self) -> None:
        self.bindings.clear()


class DescriptorSetCache:
    """Keeps track of allocated descriptor sets so they can be reused.

    Sets are handed out per group; resetting a group makes its sets
    available again.
    """

    def __init__(self, factory: Callable[[], Any] = DescriptorSet) -> None:
        self._factory = factory
        self.allocated_sets: list[Any] = []
        self._sets_in_use: list[list[int]] = []
        self._unused_sets: list[int] = []

    def allocate(self, group=0):
        """A currently unused descriptor set, recorded as in use by ``group``."""
        if group < 0:
            raise ValueError("group must not be negative")
        while len(self._sets_in_use) <= group:
            self._sets_in_use.append([])

        if self._unused_sets:
            index = self._unused_sets.pop()
        else:
            self.allocated_sets.append(self._factory())
            index = len(self.allocated_sets) - 1

        self._sets_in_use[group].append(index)
        return self.allocated_sets[index]

    def reset(self, group=0) -> None:
        """Mark the sets of ``group`` as no longer used so they can be recycled."""
        if not 0 <= group < len(self._sets_in_use):
            return
        self._unused_sets.extend(self._sets_in_use[group])
        self._sets_in_use[group].clear()

    def in_use(self, group=0) -> int:
        """Number of sets currently held by ``group``."""
        if not 0 <= group < len(self._sets_in_use):
            return 0
        return len(self._sets_in_use[group])

    def clean_up(self) -> None:
        for descriptor_set in self.allocated_sets:
            clean = getattr(descriptor_set, "clean_up", None)
            if clean is not None:
                clean()
        self.allocated_sets.clear()
        self._sets_in_use.clear()
        self._unused_sets.clear()