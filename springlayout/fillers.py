from __future__ import annotations

""" Filler objects for springs and struts layout.

Neither kind draws anything. They exist only to shape the space between the other
children of a Row or Column:
	Spring		natural size 0, soaks up any excess space, gives up all its space first
	Strut		fixed length, never stretched or compressed
"""

from .constants import ROLE_SPRING, ROLE_STRUT
from .drawn_object import DrawnObject
from .size_config import SizeConfig


class Spring(DrawnObject):
	layout_role = ROLE_SPRING

	def __init__(self, x=0, y=0, *, context=None):
		super().__init__(x, y, 0, 0,
			w_config=SizeConfig.elastic(0), h_config=SizeConfig.elastic(0), context=context)


class Strut(DrawnObject):
	layout_role = ROLE_STRUT

	def __init__(self, w=0, h=0, *, context=None):
		super().__init__(0, 0, w, h, context=context)

	@classmethod
	def horizontal(cls, length, *, context=None):
		"""A strut holding `length` of space in a Row."""
		return cls(w=length, h=0, context=context)

	@classmethod
	def vertical(cls, length, *, context=None):
		"""A strut holding `length` of space in a Column."""
		return cls(w=0, h=length, context=context)
