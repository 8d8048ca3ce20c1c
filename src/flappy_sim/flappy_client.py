"""
flappy_client.py

Single-player pygame front end: input wiring, asset loading and rendering.
The simulation itself lives in simulation.py and never sees pygame.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT,
    SKY_BLUE, BLACK, GREEN, RED
)
from .data_models import FrameSnapshot
from .clock import monotonic_ms
from .frame_driver import FixedStepDriver
from .simulation import Action, Simulation

logger = logging.getLogger(__name__)

# Render loop may run faster than the simulation; the driver keeps ticks fixed
RENDER_FPS = 120

BIRD_IMAGE = "bird.png"
PIPE_IMAGE = "pipe.png"
FONT_FILE = "MaximaNouva-Regular.otf"
FONT_SIZE = 18


def action_for_event(event) -> Optional[Action]:
    """Maps a pygame event to a simulation action, or None if it has no meaning."""
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_SPACE:
            return Action.FLAP
        if event.key == pygame.K_r:
            return Action.RESET
        return None
    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
        return Action.ACTIVATE
    return None


@dataclass
class Assets:
    """Loaded visual resources. A None slot means draw a placeholder."""
    bird: Optional[pygame.Surface] = None
    pipe: Optional[pygame.Surface] = None
    font: Optional[pygame.font.Font] = None


def _load_image(path: Path) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as e:
        logger.warning("Could not load image %s (%s); using placeholder.", path, e)
        return None


def load_assets(base_dir: Union[str, Path] = ".") -> Assets:
    """Loads the bird/pipe images and the HUD font from base_dir."""
    base = Path(base_dir)
    assets = Assets(bird=_load_image(base / BIRD_IMAGE), pipe=_load_image(base / PIPE_IMAGE))
    try:
        assets.font = pygame.font.Font(str(base / FONT_FILE), FONT_SIZE)
    except (pygame.error, OSError) as e:
        logger.warning("Could not load font %s (%s); using default font.", FONT_FILE, e)
        assets.font = pygame.font.Font(None, FONT_SIZE + 6)
    return assets


# ----------------- Game Client (rendering / input) -----------------

class FlappyClient:
    def __init__(self, asset_dir: Union[str, Path] = "."):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Flappy Bird")

        self.assets = load_assets(asset_dir)
        self.simulation = Simulation()
        self.driver = FixedStepDriver(
            self.simulation, step_ms=self.simulation.config.frame_time_ms,
            render=self._draw_game)
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop."""
        logger.info("Starting game loop (render cap %d FPS).", RENDER_FPS)
        running = True
        while running:
            self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif (event.type == pygame.KEYDOWN and event.key == pygame.K_q
                        and self.simulation.game_over):
                    running = False
                else:
                    action = action_for_event(event)
                    if action is not None:
                        self.simulation.handle_action(action)

            self.driver.frame(monotonic_ms())

        pygame.quit()
        logger.info("Game closed.")

    def _draw_pipes(self, snapshot: FrameSnapshot):
        image = self.assets.pipe
        for pipe in snapshot.pipes:
            top_height = int(pipe.gap_top)
            bottom_height = int(SCREEN_HEIGHT - pipe.gap_bottom)
            if image is None:
                pygame.draw.rect(self.screen, GREEN, (pipe.x, 0, pipe.width, top_height))
                pygame.draw.rect(self.screen, GREEN, (pipe.x, pipe.gap_bottom, pipe.width, bottom_height))
                continue

            if top_height > 0:
                top = pygame.transform.scale(image, (int(pipe.width), top_height))
                self.screen.blit(pygame.transform.rotate(top, 180), (pipe.x, 0))
            if bottom_height > 0:
                bottom = pygame.transform.scale(image, (int(pipe.width), bottom_height))
                self.screen.blit(bottom, (pipe.x, pipe.gap_bottom))

    def _draw_bird(self, snapshot: FrameSnapshot):
        bird = snapshot.bird
        if self.assets.bird is None:
            pygame.draw.rect(self.screen, RED, (bird.x, bird.y, bird.width, bird.height))
            return

        sprite = pygame.transform.scale(self.assets.bird, (int(bird.width), int(bird.height)))
        # pygame rotates counter-clockwise; positive tilt means nose down
        sprite = pygame.transform.rotate(sprite, -bird.tilt)
        center = (bird.x + bird.width / 2, bird.y + bird.height / 2)
        self.screen.blit(sprite, sprite.get_rect(center=center))

    def _draw_game(self, snapshot: FrameSnapshot):
        """Renders one snapshot using Pygame."""
        screen = self.screen
        font = self.assets.font
        screen.fill(SKY_BLUE)

        self._draw_pipes(snapshot)
        self._draw_bird(snapshot)

        screen.blit(font.render(f"Score: {snapshot.score}", True, BLACK), (10, 12))

        if snapshot.game_over:
            lines = (
                ("Game Over!", 0),
                (f"Score: {snapshot.score}", 50),
                ("Press R to Restart or Q to Quit", 100),
            )
            for text, offset in lines:
                surf = font.render(text, True, BLACK)
                screen.blit(surf, (SCREEN_WIDTH // 2 - surf.get_width() // 2,
                                   SCREEN_HEIGHT // 3 + offset))

        pygame.display.flip()


def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    FlappyClient().run()


if __name__ == "__main__":
    main()
