# Dimensions
WIDTH, HEIGHT = 800, 500
PADDLE_WIDTH = 12
PADDLE_HEIGHT = 100
PADDLE_OFFSET = 30          # gap between each paddle and its side wall
BALL_SIZE = 14

# Speeds
BALL_SPEED = 5              # base serve speed on each axis
BOUNCE_SPEEDUP = 1.04       # |dx| grows by this on every paddle hit (uncapped)

# Scripted opponent
OPPONENT_STEP = 5
OPPONENT_DEADBAND = 25

# Frame pacing
FPS = 60

# Colours (RGB tuples)
WHITE = (255, 255, 255)
BACKGROUND = (0x11, 0x11, 0x11)
PLAYER_COLOUR = (0x4C, 0xAF, 0x50)
OPPONENT_COLOUR = (0xF4, 0x43, 0x36)

# Net / scoreboard
NET_WIDTH = 4
NET_DASH = 16
NET_SPACING = 30
SCORE_FONT_SIZE = 40
SCORE_BASELINE = 50
