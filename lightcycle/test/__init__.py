"""
Testing Module for the Light Cycle Duel

pytest suites for the game core, the session wrapper, the ticker and the
pygame renderer.
"""
