"""RCE - version constants.

Keep this module tiny and dependency-free. It is imported by many places
(core, UI, settings) and must not have side effects.
"""

APP_NAME = "RusticCurveEditor"
APP_SHORT = "RCE"

# App semantic version (must match pyproject.toml).
APP_VERSION = "0.1.0"

# Marker radius (surface px). The hit-test radius is the same value, so the
# draggable area matches what is drawn.
DEFAULT_MARKER_RADIUS = 8

# Backing store of the drawing surface (px). The widget may be shown at a
# different size; pointer positions are rescaled to these units.
DEFAULT_SURFACE_SIZE = (800, 600)

# Background asset used when nothing else is configured.
DEFAULT_BACKGROUND_IMAGE = "images/img.png"
