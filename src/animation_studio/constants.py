"""Global constants for the application."""

# Timeline settings
FPS = 60  # Nominal frame rate used to discretise progress
FRAME_DURATION_MS = 1000 / FPS  # Interval between scheduler refreshes

# Zoom settings
MIN_ZOOM = 0.5
MAX_ZOOM = 4.0
ZOOM_STEP = 0.25  # Zoom change per wheel notch or zoom button press
DEFAULT_ZOOM = 1.0

# Frame marker settings
MARKER_MIN_SPACING = 8  # Minimum spacing between markers in track units
MARKER_TRACK_WIDTH = 100  # Normalised track width (percent)
MARKER_LABEL_MAX_STEP = 10  # Label every marker while the stride is at most this
MARKER_MAJOR_MAX_STEP = 5  # Every tick is major while the stride is at most this

# Keyboard settings
KEYBOARD_JUMP_PERCENT = 10  # Percent jumped with the platform modifier held

# Bezier curve bounds (y may overshoot for bounce/elastic easing)
BEZIER_X_RANGE = (0.0, 1.0)
BEZIER_Y_RANGE = (-0.5, 1.5)

# Bezier graph geometry (pixels)
GRAPH_SIZE = 240
GRAPH_PADDING = 24

# Animation config bounds
DURATION_RANGE = (100, 3000)  # Milliseconds
DELAY_RANGE = (0, 2000)  # Milliseconds
TOGGLE_COUNT_RANGE = (1, 16)
SPEED_RANGE = (0.1, 4.0)

# Colors
DEFAULT_COLORS = {
    "active": "#275EFE",
    "success": "#10B981",
    "warning": "#F59E0B",
    "danger": "#EF4444",
    "default": "#3a3a3a",
    "default_hover": "#4a4a4a",
    "knob": "#ffffff",
}
ACTIVE_VARIANTS = ("active", "success", "warning", "danger")
