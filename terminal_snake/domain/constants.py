"""
Game constants for terminal snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: x grows to the right, y grows downwards
DIRECTION_DELTAS = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

# Key token for the quit key ('q')
QUIT = "QUIT"

# Game settings
INITIAL_SNAKE_LENGTH = 5
INITIAL_DIRECTION = LEFT
EXTEND_INTERVAL = 5          # seconds between growth events
TICK_SECONDS = 0.1
SPLASH_SECONDS = 2
GAME_OVER_SECONDS = 2

# Glyphs and messages
SNAKE_GLYPH = "O"
BORDER_GLYPH = "#"
EMPTY_GLYPH = " "
SPLASH_TEXT = "Snake Game!"
GAME_OVER_TEXT = "GAME OVER!"

# Smallest terminal that holds the border and the initial snake
MIN_WIDTH = 2 * INITIAL_SNAKE_LENGTH + 4
MIN_HEIGHT = 5
