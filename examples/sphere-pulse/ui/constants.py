"""Window, input, and HUD constants."""

# Window
SCREEN_W = 960
SCREEN_H = 720
FPS = 60

# Orbit input
DRAG_SENSITIVITY = 0.005  # radians per pixel
ZOOM_STEP = 1.1

# HUD
HUD_COLOR = (120, 120, 140)
HUD_PAD = 8
