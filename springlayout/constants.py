"""
Constants and configuration values for the springlayout package.
"""

import sys
import os

# Default geometry for newly created objects
DEFAULT_WIDTH = 42
DEFAULT_HEIGHT = 13

# Axis indices, usable directly as [axis] and [1-axis] into (x, y) / (w, h) pairs
HORIZONTAL = 0
VERTICAL = 1

# Layout roles - the closed set of ways a child can take part in springs and struts layout
ROLE_OTHER = 'other'	# ordinary child, compressible down to its minimum
ROLE_SPRING = 'spring'	# absorbs excess space, goes to zero first under shortfall
ROLE_STRUT = 'strut'	# fixed length, never stretched or compressed

# Debug tracing
DEBUG_PY = 'debugpy' in sys.modules
DEBUG_LAYOUT = os.environ.get('SPRINGLAYOUT_DEBUG', '') not in ('', '0') or DEBUG_PY
