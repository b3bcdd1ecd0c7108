"""Sphere Pulse: golden-angle point cloud with timeline-driven pulses.

Exercises pulse, pulse-lattice, pulse-tween, and pulse-scene.

Controls:
  Drag    Orbit the camera
  Wheel   Zoom
  R       Restart the animation
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

import pygame

from pulse import Engine
from pulse_scene import OrbitCamera, SceneConfig, fill_scene, make_spin_system
from pulse_tween import make_timeline_system

from ui.constants import DRAG_SENSITIVITY, FPS, SCREEN_H, SCREEN_W, ZOOM_STEP
from ui.render import draw_hud, draw_lines, draw_points

logger = logging.getLogger("sphere-pulse")


class SceneState:
    """Holds the engine, the point cloud group, and the camera."""

    def __init__(self, config: SceneConfig, fps: int) -> None:
        self.config = config
        self.fps = fps
        self.camera = OrbitCamera.looking_from(
            config.camera_position, fov=config.fov, near=config.near, far=config.far
        )
        self.reset()

    def reset(self) -> None:
        self.engine = Engine(fps=self.fps)
        self.engine.add_system(make_timeline_system())
        self.engine.add_system(make_spin_system())
        self.group = fill_scene(self.engine.world, self.engine.clock.now(), self.config)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--points", type=int, default=SceneConfig.point_count)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--width", type=int, default=SCREEN_W)
    parser.add_argument("--height", type=int, default=SCREEN_H)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = replace(SceneConfig(), point_count=args.points)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Sphere Pulse - pulse-tween demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = SceneState(config, args.fps)
    dragging = False
    running = True

    while running:
        clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    logger.info("restarting animation")
                    state.reset()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                dragging = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                dragging = False
            elif event.type == pygame.MOUSEMOTION and dragging:
                dx, dy = event.rel
                state.camera.orbit(-dx * DRAG_SENSITIVITY, dy * DRAG_SENSITIVITY)
            elif event.type == pygame.MOUSEWHEEL:
                state.camera.zoom(ZOOM_STEP ** -event.y)

        # --- Frame ---
        state.engine.step()

        # --- Render ---
        screen.fill(config.background)
        draw_lines(screen, state.engine.world, state.group, state.camera, config)
        draw_points(screen, state.engine.world, state.group, state.camera, config)
        draw_hud(screen, font, state.engine.clock.frame_time, len(state.group.points))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
