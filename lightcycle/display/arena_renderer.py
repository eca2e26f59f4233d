"""
Pygame renderer for the Light Cycle Duel.

Draws whatever the game core hands back: a RoundState for the board and a
TickResult for crash effects. It holds no game rules and never mutates state.
"""

import numpy as np
import pygame

from ..config import CELL_SIZE


class ArenaRenderer:
    """Paints the arena, trails, heads, crashes and HUD onto a pygame surface"""

    def __init__(self, width, height, cell_size=CELL_SIZE, surface=None):
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.pixel_size = (width * cell_size, height * cell_size)
        self.surface = surface if surface is not None else pygame.Surface(self.pixel_size)

        # Colors
        self.BACKGROUND = (3, 6, 23)
        self.GRID_CYAN = (6, 34, 44)
        self.GRID_MAGENTA = (22, 8, 38)
        self.TEXT = (224, 242, 254)
        self.DIM_TEXT = (125, 170, 190)
        self.IMPACT = (255, 255, 255, 90)

        self._fonts = {}

    def _font(self, size):
        # Fonts need pygame.font initialised, so build them on first use
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def cell_rect(self, position, inset=0):
        x, y = position
        return pygame.Rect(
            x * self.cell_size + inset,
            y * self.cell_size + inset,
            self.cell_size - 2 * inset,
            self.cell_size - 2 * inset,
        )

    def cell_center(self, position):
        return self.cell_rect(position).center

    def draw_arena(self):
        """Background plus a faint grid every second cell"""
        self.surface.fill(self.BACKGROUND)
        width_px, height_px = self.pixel_size
        for x in range(0, self.width + 1, 2):
            pygame.draw.line(self.surface, self.GRID_CYAN,
                             (x * self.cell_size, 0), (x * self.cell_size, height_px), 1)
        for y in range(0, self.height + 1, 2):
            pygame.draw.line(self.surface, self.GRID_MAGENTA,
                             (0, y * self.cell_size), (width_px, y * self.cell_size), 1)

    def draw_state(self, state, roster):
        """Trails for every occupied cell, then a bright head per cycle"""
        self.draw_arena()
        if state is None:
            return

        colors = {entry.cycle_id: entry for entry in roster}
        grid = state.occupancy_grid()

        trails = pygame.Surface(self.pixel_size, pygame.SRCALPHA)
        for index, cycle in enumerate(state.cycles):
            trail_color = colors[cycle.cycle_id].trail_color
            # argwhere gives (row, col) pairs
            for row, col in np.argwhere(grid == index):
                pygame.draw.rect(trails, trail_color, self.cell_rect((int(col), int(row))))
        self.surface.blit(trails, (0, 0))

        for cycle in state.cycles:
            entry = colors[cycle.cycle_id]
            pygame.draw.rect(self.surface, entry.color, self.cell_rect(cycle.position))
            pygame.draw.rect(self.surface, entry.accent, self.cell_rect(cycle.position, inset=1), 2)

    def draw_crash(self, move, entry):
        """Glow at the impact cell, clamped into the arena for wall hits"""
        center = self.cell_center(move.impact(self.width, self.height))
        radius = int(self.cell_size / 1.6)

        glow = pygame.Surface(self.pixel_size, pygame.SRCALPHA)
        pygame.draw.circle(glow, self.IMPACT, center, radius)
        pygame.draw.circle(glow, entry.accent, center, radius, 2)
        self.surface.blit(glow, (0, 0))

    def draw_result_effects(self, result, roster):
        if result is None:
            return
        colors = {entry.cycle_id: entry for entry in roster}
        for move in result.crashed:
            self.draw_crash(move, colors[move.cycle_id])

    def _blit_label(self, text, pos, color, size=24, background=(0, 0, 0, 100)):
        label = self._font(size).render(text, True, color)
        label_bg = pygame.Surface((label.get_width() + 16, label.get_height() + 8), pygame.SRCALPHA)
        label_bg.fill(background)
        self.surface.blit(label_bg, pos)
        self.surface.blit(label, (pos[0] + 8, pos[1] + 4))
        return label_bg.get_height()

    def draw_scoreboard(self, game):
        """Names, scores, round counter and controls in the top-left corner"""
        y_offset = 6
        scores = game.get_scores()
        for entry in game.config.roster:
            text = f"{entry.display_name}: {scores[entry.cycle_id]}"
            y_offset += self._blit_label(text, (6, y_offset), entry.color) + 4

        y_offset += self._blit_label(f"Round {game.round:02d}", (6, y_offset), self.DIM_TEXT, size=20) + 4

        legend = "  ".join(
            f"{entry.display_name}: {entry.controls.up}/{entry.controls.left}/{entry.controls.down}/{entry.controls.right}"
            for entry in game.config.roster
            if entry.controls is not None
        )
        if legend:
            self._blit_label(legend, (6, y_offset), self.DIM_TEXT, size=20)

    def result_message(self, game):
        if game.winner is not None:
            return f"{game.config.player(game.winner).display_name} wins"
        return "Head-on collision! Sudden death."

    def draw_result(self, game):
        """Banner in the middle of the arena once a round has ended"""
        title = self._font(40).render(self.result_message(game), True, self.TEXT)
        hint = self._font(24).render("Press start for another round.", True, self.DIM_TEXT)

        box_w = max(title.get_width(), hint.get_width()) + 48
        box_h = title.get_height() + hint.get_height() + 36
        box = pygame.Surface((box_w, box_h), pygame.SRCALPHA)
        box.fill((0, 0, 0, 180))

        center_x, center_y = self.surface.get_width() // 2, self.surface.get_height() // 2
        left, top = center_x - box_w // 2, center_y - box_h // 2
        self.surface.blit(box, (left, top))
        self.surface.blit(title, title.get_rect(midtop=(center_x, top + 12)))
        self.surface.blit(hint, hint.get_rect(midtop=(center_x, top + 24 + title.get_height())))

    def draw_idle(self):
        """Prompt shown before the first round"""
        hint = self._font(32).render("Press SPACE to start", True, self.TEXT)
        self.surface.blit(hint, hint.get_rect(center=self.surface.get_rect().center))
