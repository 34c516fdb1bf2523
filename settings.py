WIDTH = 400
HEIGHT = 400
FPS = 60
BACKGROUND_COLOR = (0, 0, 0)
CAPTION = "Light Caster"

# One ray per integer degree
RAY_COUNT = 360
