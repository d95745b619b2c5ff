"""Extraction constants.

Values here are fixed by the window matching algorithm and are NOT
user-configurable. For configurable values, see models.py.
"""

WINDOW_WIDTH = 3
"""Number of sibling nodes inspected per window: (doc, location, target)."""

DUMMY_LINE = 0
"""Line number of the synthetic location marker closing a dangling comment."""

TYPE_SCOPE_FLAG = "type"
"""Scope flag set while traversing the body of a type declaration."""
