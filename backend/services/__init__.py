"""
Infrastructure around the game rules: the tick timer, the canvas
renderer, host notifications and the single-owner runtime loop.
"""
