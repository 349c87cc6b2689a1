"""
springlayout - springs and struts box layout for Row and Column containers.
"""

from .size_config import SizeConfig
from .layout_context import LayoutContext, get_layout_context, set_layout_context
from .drawn_object import DrawnObject, Group
from .fillers import Spring, Strut
from .axis_box import AxisBox, Row, Column
