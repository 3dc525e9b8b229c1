"""
Game constants for HexSnake.
"""

# Board settings
BOARD_RADIUS = 15
TICK_MS = 120

# Faces of the board
FACE_A = 0
FACE_B = 1
FACES = (FACE_A, FACE_B)
FACE_NAMES = {FACE_A: "A", FACE_B: "B"}

# Scoring
FOOD_SCORE = 10

# Food-eaten effect
EAT_EFFECT_MS = 500
HEX_SIZE = 10

# Canonical starting body, head first, on face A
INITIAL_SNAKE = ((0, 0), (-1, 0), (-2, 0))

# Turn commands
TURN_LEFT = -1
TURN_RIGHT = 1
VALID_TURNS = {TURN_LEFT, TURN_RIGHT}

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
