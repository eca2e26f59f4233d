#!/usr/bin/env python3
"""
Light Cycle Duel Demo

Two players on one keyboard. Photon steers with W/A/S/D, Laser with the arrow
keys. SPACE or ENTER starts (or restarts) a round, ESC quits.
"""

import argparse
import logging
import queue

import pygame

from .config import CELL_SIZE, GRID_COLS, GRID_ROWS, TICK_MS, GameConfig, scaled_roster
from .display import ArenaRenderer
from .game import LightCycleGame, RoundStatus, Ticker

FPS = 60
START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


class DuelApp:
    """Wires a LightCycleGame, its Ticker and the renderer into a window"""

    def __init__(self, config, cell_size=CELL_SIZE):
        self.config = config
        self.game = LightCycleGame(config)
        self.results = queue.Queue()
        self.ticker = None

        pygame.init()
        self.renderer = ArenaRenderer(config.width, config.height, cell_size)
        self.window = pygame.display.set_mode(self.renderer.pixel_size)
        pygame.display.set_caption("Tron Light Cycle Duel")
        self.clock = pygame.time.Clock()
        self.last_result = None

    def _tick(self):
        # Runs on the ticker thread; hand results to the render loop
        result = self.game.advance_tick()
        self.results.put(result)
        return not result.ended

    def start_round(self):
        self.stop_ticker()
        # Results from the round being replaced are stale
        while not self.results.empty():
            self.results.get_nowait()
        self.game.start_round()
        self.last_result = None
        self.ticker = Ticker(self._tick, self.config.tick_ms).start()

    def stop_ticker(self):
        if self.ticker is not None:
            self.ticker.stop()
            self.ticker = None

    def handle_event(self, event):
        """Returns False when the app should close"""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in START_KEYS:
                self.start_round()
            else:
                self.game.handle_key(pygame.key.name(event.key))
        return True

    def drain_results(self):
        while True:
            try:
                result = self.results.get_nowait()
            except queue.Empty:
                return
            self.last_result = result
            if result.ended:
                if result.winner is not None:
                    print(f"Round over: {self.config.player(result.winner).display_name} wins after {result.tick} ticks")
                else:
                    print(f"Round over: double elimination after {result.tick} ticks")
                print(f"  Scores: {self.game.get_scores()}")

    def render(self):
        state = self.game.snapshot()
        self.renderer.draw_state(state, self.config.roster)
        self.renderer.draw_result_effects(self.last_result, self.config.roster)
        self.renderer.draw_scoreboard(self.game)

        status = self.game.status
        if status is RoundStatus.ENDED:
            self.renderer.draw_result(self.game)
        elif status is RoundStatus.IDLE:
            self.renderer.draw_idle()

        self.window.blit(self.renderer.surface, (0, 0))
        pygame.display.flip()

    def run(self):
        running = True
        try:
            while running:
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False
                        break
                if self.ticker is not None and self.ticker.error is not None:
                    raise self.ticker.error
                self.drain_results()
                self.render()
                self.clock.tick(FPS)
        finally:
            # No tick may fire once the window is gone
            self.stop_ticker()
            pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Two-player light cycle duel")
    parser.add_argument("--width", type=int, default=GRID_COLS, help="grid columns")
    parser.add_argument("--height", type=int, default=GRID_ROWS, help="grid rows")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per cell")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS, help="milliseconds per tick")
    parser.add_argument("--verbose", action="store_true", help="log every crash")
    return parser.parse_args(argv)


def main(argv=None):
    """Main demo function"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = GameConfig(
            width=args.width,
            height=args.height,
            tick_ms=args.tick_ms,
            roster=scaled_roster(args.width, args.height),
        )
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 2

    print("Tron Light Cycle Duel")
    print("=" * 40)
    print(f"Grid {config.width}x{config.height}, {config.ticks_per_second} ticks per second")
    print("Photon: W/A/S/D    Laser: arrow keys")
    print("SPACE to start a round, ESC to quit")

    try:
        DuelApp(config, cell_size=args.cell_size).run()
    except KeyboardInterrupt:
        print("\n\nDemo interrupted by user.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
