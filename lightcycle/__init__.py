"""
Light Cycle Duel

Two-player grid duel: steer your cycle, leave a lethal trail, and outlast the
other player.
"""

__version__ = "0.1.0"
