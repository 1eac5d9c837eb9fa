"""
Game constants for the snake simulation.
"""

# Arena
ARENA_WIDTH = 10
ARENA_HEIGHT = 10

# Starting state of every fresh snake (head first)
START_HEAD = (3, 3)
START_BODY = [(3, 2)]
START_DIRECTION = "RIGHT"

# Logical sizes relative to one grid cell
HEAD_SIZE = 0.8
SEGMENT_SIZE = 0.65
FOOD_SIZE = 0.8

# Tick cadence (seconds)
MOVE_INTERVAL = 0.25
FOOD_INTERVAL = 1.0
FRAME_INTERVAL = 1 / 60

# Food placement gives up on random draws after this many rejections
FOOD_SPAWN_MAX_ATTEMPTS = 100

# Death reasons
WALL = "wall"
SELF = "self"
