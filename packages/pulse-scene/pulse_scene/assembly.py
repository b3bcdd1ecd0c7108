"""Builds the point cloud group and derives what the renderer draws."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pulse_lattice import SpherePoint, adjacent_pairs, distribute
from pulse_tween import Animator, arm

from pulse_scene import vec
from pulse_scene.animations import (
    collapse_timeline,
    intro_timeline,
    pulse_timeline,
    reveal_timeline,
)
from pulse_scene.components import GroupTag, PointTag, Spin, Transform, Uniform, Vector3
from pulse_scene.config import SceneConfig

if TYPE_CHECKING:
    from pulse import EntityId, World

logger = logging.getLogger(__name__)


@dataclass
class PointCloudGroup:
    """The lattice points, their entities, and the shared line-reveal scalar.

    ``reveal`` is the same object the reveal Track writes to, so the
    renderer sees its value without going through the World.
    """

    group: EntityId
    points: list[SpherePoint]
    point_entities: list[EntityId] = field(default_factory=list)
    reveal: Uniform = field(default_factory=Uniform)
    reveal_entity: EntityId | None = None


def fill_scene(world: World, now: float, config: SceneConfig | None = None) -> PointCloudGroup:
    """Spawn the group and its points, arming every timeline at ``now``."""
    config = config or SceneConfig()
    config.validate()

    lattice = distribute(config.point_count, randomize=False)

    group_eid = world.spawn()
    rx, ry, rz = config.group_rotation
    group_transform = Transform(rotation=Vector3(rx, ry, rz))
    world.attach(group_eid, GroupTag())
    world.attach(group_eid, group_transform)
    world.attach(group_eid, Spin(rate=config.spin_rate))
    world.attach(
        group_eid,
        Animator([arm(collapse_timeline(config), group_transform.scale, now)]),
    )

    group = PointCloudGroup(group=group_eid, points=lattice)

    for point in lattice:
        eid = world.spawn()
        home = Vector3(point.x, point.y, point.z)
        transform = Transform(position=home.copy())
        world.attach(eid, PointTag(index=point.index))
        world.attach(eid, transform)
        world.attach(
            eid,
            Animator(
                [
                    arm(intro_timeline(home, config), transform.position, now),
                    arm(pulse_timeline(transform.scale.copy(), point.index, config),
                        transform.scale, now),
                ]
            ),
        )
        group.point_entities.append(eid)

    reveal_eid = world.spawn()
    world.attach(reveal_eid, group.reveal)
    world.attach(reveal_eid, Animator([arm(reveal_timeline(config), group.reveal, now)]))
    group.reveal_entity = reveal_eid

    logger.info("filled scene with %d points at t=%.1fms", len(lattice), now)
    return group


def world_positions(world: World, group: PointCloudGroup) -> list[vec.Vec3]:
    """Point positions after group scale and rotation, in spiral order."""
    group_transform = world.get(group.group, Transform)
    group_scale = group_transform.scale.as_tuple()
    group_rotation = group_transform.rotation.as_tuple()
    positions = []
    for eid in group.point_entities:
        local = world.get(eid, Transform).position.as_tuple()
        positions.append(vec.rotate_euler(vec.mul(local, group_scale), group_rotation))
    return positions


def point_radii(world: World, group: PointCloudGroup, config: SceneConfig) -> list[float]:
    """Rendered radius of every point, including its own and the group's scale."""
    group_scale = world.get(group.group, Transform).scale.x
    return [
        config.point_radius * world.get(eid, Transform).scale.x * group_scale
        for eid in group.point_entities
    ]


def line_segments(
    world: World, group: PointCloudGroup
) -> list[tuple[vec.Vec3, vec.Vec3, float]]:
    """(start, end, opacity) for each spiral neighbour pair, wrapping around."""
    opacity = max(0.0, min(1.0, group.reveal.value))
    if opacity == 0.0:
        return []
    positions = world_positions(world, group)
    return [
        (positions[a.index], positions[b.index], opacity)
        for a, b in adjacent_pairs(group.points)
    ]
