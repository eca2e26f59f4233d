"""
Display Module for the Light Cycle Duel

Pygame rendering of rounds produced by the game core.
"""

from .arena_renderer import ArenaRenderer

__all__ = ['ArenaRenderer']
