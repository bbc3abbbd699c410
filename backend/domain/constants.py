"""
Game constants for the snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Raw keyboard keys (and on-screen buttons) -> direction
KEY_TO_DIRECTION = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
}

# Board geometry. Positions are pixel offsets, always multiples of BOX_SIZE.
BOX_SIZE = 20
GRID_SIZE = 30
CANVAS_SIZE = BOX_SIZE * GRID_SIZE

INITIAL_CELL = (BOX_SIZE * 5, BOX_SIZE * 5)
INITIAL_DIRECTION = RIGHT

# Tick interval in milliseconds
SPEED_MAX = 100           # starting interval (slowest)
SPEED_MIN = 50            # fastest interval
SPEED_DECREMENT = 5       # applied each time food is eaten
SPEED_RANDOM_THRESHOLD = 200  # score at which the interval is pinned to SPEED_MIN

FOOD_REWARD = 10

# Raw key buffer used by U-turn sequencing
MAX_BUFFER_SIZE = 2

# Two-key chords that turn the snake around without passing through the reverse
U_TURN_PATTERNS = {
    RIGHT: [("ArrowUp", "ArrowLeft"), ("ArrowDown", "ArrowLeft")],
    LEFT: [("ArrowUp", "ArrowRight"), ("ArrowDown", "ArrowRight")],
    UP: [("ArrowLeft", "ArrowDown"), ("ArrowRight", "ArrowDown")],
    DOWN: [("ArrowLeft", "ArrowUp"), ("ArrowRight", "ArrowUp")],
}

# Lifecycle phases
IDLE = "IDLE"
RUNNING = "RUNNING"
GAME_OVER = "GAME_OVER"
