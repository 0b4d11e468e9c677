"""Pygame 2D visualization for the Insect Board.

Renders the board, food markers and insects in a window and resolves
one insect's move per simulation tick.  The tick rate is adjustable
while the display refreshes at the Pygame frame rate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pygame

from insectboard.board.entities import Color

if TYPE_CHECKING:
    from insectboard.simulation.engine import SimulationEngine

# Colour palette
_BG = (30, 20, 10)
_GRID_LINE = (60, 45, 30)
_TEXT = (200, 200, 200)

_INSECT_COLOURS: dict[Color, tuple[int, int, int]] = {
    Color.RED: (230, 70, 70),
    Color.GREEN: (90, 210, 90),
    Color.BLUE: (90, 140, 255),
    Color.YELLOW: (250, 220, 60),
}

# Food colour range (dark green -> bright green)
_FOOD_LO = np.array([20, 60, 10], dtype=np.float64)
_FOOD_HI = np.array([50, 200, 30], dtype=np.float64)


class PygameRenderer:
    """Renders a SimulationEngine state into a Pygame window.

    Attributes:
        engine: The simulation engine to visualise.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    # Speed presets: insect turns per second
    _SPEED_STEPS: ClassVar[list[float]] = [
        0.25,
        0.5,
        1.0,
        2.0,
        5.0,
        10.0,
    ]

    def __init__(
        self,
        engine: SimulationEngine,
        cell_size: int = 40,
        turns_per_second: float = 1.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            engine: The simulation engine to render.
            cell_size: Pixel width/height per grid cell.
            turns_per_second: Insect moves resolved per real-time second.
        """
        self.engine = engine
        self.cell_size = cell_size
        self.turns_per_second = turns_per_second
        self._speed_index = self._nearest_speed(turns_per_second)
        self._turn_accumulator = 0.0

        side = engine.grid.size * cell_size
        self._panel_width = 260
        self._win_w = side + self._panel_width
        self._win_h = max(side, 360)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Insect Board")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.label_font = pygame.font.SysFont("monospace", max(10, cell_size // 2))
        self.running = True
        self.paused = True

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        best = 0
        best_diff = abs(self._SPEED_STEPS[0] - tps)
        for i, s in enumerate(self._SPEED_STEPS):
            diff = abs(s - tps)
            if diff < best_diff:
                best, best_diff = i, diff
        return best

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, resolve turns, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0  # seconds elapsed
            self._handle_events()
            if not self.paused and not self.engine.finished:
                self._turn_accumulator += self.turns_per_second * dt
                turns = int(self._turn_accumulator)
                self._turn_accumulator -= turns
                for _ in range(turns):
                    if self.engine.finished:
                        break
                    self.engine.step()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_RIGHT:
                    if not self.engine.finished:
                        self.engine.step()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.turns_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.turns_per_second = self._SPEED_STEPS[self._speed_index]

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_food()
        self._draw_grid_lines()
        self._draw_insects()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_grid_lines(self) -> None:
        cs = self.cell_size
        side = self.engine.grid.size * cs
        for i in range(self.engine.grid.size + 1):
            pygame.draw.line(self.screen, _GRID_LINE, (i * cs, 0), (i * cs, side))
            pygame.draw.line(self.screen, _GRID_LINE, (0, i * cs), (side, i * cs))

    def _draw_food(self) -> None:
        """Draw food as green squares shaded by value."""
        cs = self.cell_size
        layer = self.engine.grid.food_layer()
        max_val = layer.max()
        if max_val <= 0:
            return
        for row, col in zip(*np.nonzero(layer), strict=True):
            t = layer[row, col] / max_val
            colour = _FOOD_LO + t * (_FOOD_HI - _FOOD_LO)
            pygame.draw.rect(
                self.screen,
                colour.astype(int).tolist(),
                (int(col) * cs, int(row) * cs, cs, cs),
            )

    def _draw_insects(self) -> None:
        """Draw each insect as a coloured disc marked with its species initial."""
        cs = self.cell_size
        radius = max(3, cs // 2 - 3)
        for insect in self.engine.grid.insects():
            cx = (insect.position.col - 1) * cs + cs // 2
            cy = (insect.position.row - 1) * cs + cs // 2
            pygame.draw.circle(self.screen, _INSECT_COLOURS[insect.color], (cx, cy), radius)
            surf = self.label_font.render(insect.species.value[0], True, _BG)
            self.screen.blit(surf, surf.get_rect(center=(cx, cy)))

    def _draw_info_panel(self) -> None:
        """Draw a results panel on the right side of the window."""
        panel_x = self.engine.grid.size * self.cell_size + 10
        y = 10

        if self.engine.finished:
            state = "DONE"
        else:
            state = "PAUSED" if self.paused else "RUNNING"
        lines = [
            f"Turn: {self.engine.turn}/{len(self.engine.insects)}",
            f"Speed: {self.turns_per_second:.2f} t/s",
            state,
            f"Food left: {self.engine.grid.total_food()}",
            "",
            "--- Results ---",
        ]
        lines += [result.format() for result in self.engine.results]
        lines += [
            "",
            "--- Controls ---",
            "SPACE: pause",
            "RIGHT: one turn",
            "+/-: speed",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
