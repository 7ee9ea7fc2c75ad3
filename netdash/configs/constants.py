"""Fixed constants shared by the wire parser, layout and interaction code."""

# Delta-tag wire format
FIELD_SEPARATOR: str = "$"
TOPOLOGY_TAG: str = ":"
NODE_TAG: str = "#"
LINK_TAG: str = "~"

# Link defaults applied when a field is empty or absent
DEFAULT_LINK_TYPE: str = "unknown"
DEFAULT_LINK_INFO: str = "<empty>"

# Physics energy levels
REHEAT_ALPHA: float = 0.5
DRAG_ALPHA_TARGET: float = 0.3

# Viewport grid search bound (rows and cols each in 1..MAX_GRID_DIM)
MAX_GRID_DIM: int = 5
MAX_GRID_ASPECT_DIFF: int = 2

# Rendering geometry
LINK_OFFSET_SPACING: float = 12.0  # line width 8 + gap 4
ENDPOINT_ROW_HEIGHT: float = 40.0
ENDPOINT_ROW_PADDING: float = 5.0
