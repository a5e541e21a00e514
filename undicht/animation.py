"""Skeletal animations made of per-node keyframe tracks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from undicht.node_animation import NodeAnimation

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Animation:
    """A named animation addressed within its scene group.

    ``duration`` is measured in ticks, not seconds.
    """

    name: str = ""
    duration: float = 0.0
    ticks_per_second: float = 1.0
    node_animations: list[NodeAnimation] = field(default_factory=list)

    def add_node_animation(self, node_name) -> NodeAnimation:
        """Add a track for a node; an existing track for that node is returned instead."""
        existing = self.node_animation(node_name)
        if existing is not None:
            return existing
        track = NodeAnimation(node=node_name)
        self.node_animations.append(track)
        return track

    def node_animation(self, node_name) -> NodeAnimation | None:
        """The track affecting ``node_name``, or None if there is none."""
        return next((n for n in self.node_animations if n.node == node_name), None)

    def _animation_time(self, time: float) -> float:
        if self.ticks_per_second == 0:
            raise ValueError("ticks_per_second must not be zero")
        duration_in_seconds = self.duration / self.ticks_per_second
        if duration_in_seconds == 0:
            raise ValueError("animation duration must not be zero")
        rel_progress = time / duration_in_seconds
        repeating_progress = rel_progress - int(rel_progress)
        return repeating_progress * self.duration

    def update(self, time, group) -> None:
        """Set the local matrices of the animated bones for ``time`` in seconds.

        The animation repeats; ``group`` must provide ``bone(name)``.
        """
        rel_time = self._animation_time(float(time))
        for track in self.node_animations:
            transform = track.transform_matrix(rel_time)
            bone = group.bone(track.node)
            if bone is None:
                logger.error("Bone %s couldnt be updated", track.node)
                continue
            bone.local_matrix = transform