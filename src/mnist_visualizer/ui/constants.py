"""Centralized UI constants for the network visualizer.

This file only stores values (sizes, colors, timings, layout).
Keeping these in one place makes the UI easier to tune later.
"""

# The network expects 28x28 pixel images (MNIST format).
DRAW_GRID_SIZE = 28
# Each logical pixel is displayed as a 10x10 square.
DRAW_CANVAS_SIZE = 280

# Main window sizing defaults.
WINDOW_SIZE = "1400x940"
WINDOW_MIN_SIZE = (1180, 820)

# Dark palette.
COLOR_BG = "#1a1a1a"
COLOR_CARD = "#2a2a2a"
COLOR_INK = "#ffffff"
COLOR_SUB = "#aaaaaa"
COLOR_EDGE = "#444444"
COLOR_SCENE_BG = "#0a0a0a"

COLOR_STATUS_INFO_BG = "#1e293b"
COLOR_STATUS_INFO_FG = "#cbd5e1"

COLOR_CLEAR_BTN = "#ef4444"
COLOR_CLEAR_BTN_HOVER = "#dc2626"

# Drawing canvas: dark ink on white paper, light grid lines.
COLOR_PAPER = "#ffffff"
COLOR_GRID_LINE = "#e0e0e0"

# Probability bars.
COLOR_BAR_PREDICTED = "#10b981"
COLOR_BAR_HIGH = "#f59e0b"
COLOR_BAR_MEDIUM = "#6366f1"
COLOR_BAR_LOW = "#475569"
COLOR_BAR_TRACK = "#1a1a1a"

# Quiet period after the last stroke before the network is re-run.
INFERENCE_DEBOUNCE_MS = 50

# Auto-rotation of the network diagram.
ROTATION_INTERVAL_MS = 80
ROTATION_STEP_RAD = 0.02

# 3D layout of the layers: (label, neuron count, origin x/y/z).
LAYER_LAYOUT = [
    ("Input (784)", 784, (-8.0, 0.0, 0.0)),
    ("Hidden 1 (64)", 64, (-3.0, 0.0, 0.0)),
    ("Hidden 2 (32)", 32, (2.0, 0.0, 0.0)),
    ("Output (10)", 10, (6.0, 0.0, 0.0)),
]
NEURON_SPACING = 0.3
# World-space radius of one neuron sphere.
NEURON_RADIUS = 0.08
# Camera sits on the +z axis looking at the origin.
CAMERA_DISTANCE = 15.0
CAMERA_FOV_DEG = 50.0

# Upper bound for the sliders in the advanced settings panel.
MAX_CONNECTIONS_LIMIT = 20
