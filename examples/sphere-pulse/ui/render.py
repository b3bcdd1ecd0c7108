"""Draws the point cloud and its connecting lines onto a pygame surface."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from pulse_scene import (
    OrbitCamera,
    PointCloudGroup,
    SceneConfig,
    line_segments,
    point_radii,
    world_positions,
)

from ui.constants import HUD_COLOR, HUD_PAD

if TYPE_CHECKING:
    from pulse import World


def _blend(color: tuple[int, int, int], background: tuple[int, int, int], alpha: float):
    return tuple(round(b + (c - b) * alpha) for c, b in zip(color, background))


def draw_lines(
    surface: pygame.Surface,
    world: World,
    group: PointCloudGroup,
    camera: OrbitCamera,
    config: SceneConfig,
) -> None:
    w, h = surface.get_size()
    for start, end, opacity in line_segments(world, group):
        a = camera.project(start, w, h)
        b = camera.project(end, w, h)
        if a is None or b is None:
            continue
        color = _blend(config.line_color, config.background, opacity)
        pygame.draw.aaline(surface, color, (a[0], a[1]), (b[0], b[1]))


def draw_points(
    surface: pygame.Surface,
    world: World,
    group: PointCloudGroup,
    camera: OrbitCamera,
    config: SceneConfig,
) -> None:
    w, h = surface.get_size()
    projected = []
    for pos, radius in zip(world_positions(world, group), point_radii(world, group, config)):
        p = camera.project(pos, w, h)
        if p is None:
            continue
        projected.append((p, abs(radius)))

    # Far to near so closer points overdraw.
    projected.sort(key=lambda item: -item[0][2])
    for (sx, sy, depth), radius in projected:
        px = radius * camera.pixel_scale(depth, h)
        if px < 0.5:
            continue
        pygame.draw.circle(surface, config.point_color, (round(sx), round(sy)), max(1, round(px)))


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, now: float, points: int) -> None:
    text = f"t={now / 1000:6.2f}s  points={points}  drag: orbit  wheel: zoom  esc: quit"
    label = font.render(text, True, HUD_COLOR)
    surface.blit(label, (HUD_PAD, surface.get_height() - label.get_height() - HUD_PAD))
