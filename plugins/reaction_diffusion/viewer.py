"""
Interactive Pygame Viewer for Gray-Scott Reaction-Diffusion

Runs one Simulation per window: each frame injects noise, steps the
model, maps A/B to colors and blits the result, with a one-line text
overlay on top.

Controls:
  SPACE       Pause / Resume
  R           Reseed with the current seed pattern
  H           Toggle HUD overlay
  Q / ESC     Quit
"""

import time
import numpy as np
import pygame

from .presets import get_preset


class Viewer:

    def __init__(self, sim, scale=1, preset_key=None, fps=60):
        self.sim = sim
        self.scale = max(1, int(scale))
        self.canvas_w = sim.width * self.scale
        self.canvas_h = sim.height * self.scale
        self.target_fps = fps
        self.running = True
        self.paused = False
        self.show_hud = True
        self.fps_history = []

        preset = get_preset(preset_key) if preset_key else None
        self.title = preset["name"] if preset else "Custom"

    def _render_frame(self):
        """Map the live fields to a pygame surface at simulation size."""
        rgba = self.sim.render()
        # surfarray wants (W, H, 3); alpha is always opaque
        return pygame.surfarray.make_surface(rgba[:, :, :3].swapaxes(0, 1).copy())

    def _draw_hud(self, screen, fps):
        if not self.show_hud:
            return

        stats = self.sim.stats
        line = (f"ESC to quit  |  {self.title}  |  Gen: {stats['generation']:,}  |  "
                f"{self.sim.width}x{self.sim.height}  |  FPS: {fps:.0f}")
        if self.paused:
            line = "[PAUSED]  " + line

        padding = 6
        bg_height = 24
        bg_surface = pygame.Surface((self.canvas_w, bg_height), pygame.SRCALPHA)
        bg_surface.fill((0, 0, 0, 140))
        screen.blit(bg_surface, (0, 0))

        text_surface = self.hud_font.render(line, True, (210, 215, 225))
        screen.blit(text_surface, (padding + 4, padding))

    def run(self):
        """Main viewer loop. Stops only between frames."""
        pygame.init()

        screen = pygame.display.set_mode((self.canvas_w, self.canvas_h))
        pygame.display.set_caption("Reaction-Diffusion")
        clock = pygame.time.Clock()

        self.hud_font = pygame.font.SysFont("menlo", 13)

        while self.running:
            frame_start = time.time()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event)

            if not self.running:
                break

            if not self.paused:
                self.sim.frame()

            sim_surface = self._render_frame()
            if self.scale != 1:
                sim_surface = pygame.transform.scale(
                    sim_surface, (self.canvas_w, self.canvas_h))
            screen.blit(sim_surface, (0, 0))

            # FPS
            frame_time = time.time() - frame_start
            self.fps_history.append(frame_time)
            if len(self.fps_history) > 30:
                self.fps_history.pop(0)
            avg_fps = 1.0 / max(np.mean(self.fps_history), 0.001)

            self._draw_hud(screen, avg_fps)

            pygame.display.flip()
            clock.tick(self.target_fps)

        pygame.quit()

    def _handle_keydown(self, event):
        key = event.key

        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False

        elif key == pygame.K_SPACE:
            self.paused = not self.paused

        elif key == pygame.K_r:
            self.sim.initialize()

        elif key == pygame.K_h:
            self.show_hud = not self.show_hud
