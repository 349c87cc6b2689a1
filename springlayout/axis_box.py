from __future__ import annotations

""" Springs and struts layout along a single axis.

AxisBox stacks its children along its primary axis (left to right for a Row, top to
bottom for a Column) and justifies them along the cross axis.

SIZING (bottom-up, children already sized):
	primary axis	natural, minim and maxim are the sums of the children's
	cross axis		natural, minim and maxim are the piecewise maxima of the children's

PLACEMENT (top-down, our own size already set by our parent or directly):
	excess >= 0		springs share the excess evenly, everything else stays natural
					(with no springs the excess is left over past the last child)
	excess < 0		springs go to 0, then the others give up space in proportion to
					their compressibility (natural - minim), never going below minim
					(whatever can't be made up is left to clip past the last child)
	cross axis		children take their natural size, we shrink-wrap to the largest,
					then each child is justified at the start, center or end
"""

from .constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, HORIZONTAL, VERTICAL
from .drawn_object import Group
from .size_config import SizeConfig


class AxisBox(Group):
	# Cross axis justification
	START = 'start'
	CENTER = 'center'
	END = 'end'

	# Fraction of the cross axis slack placed before each child
	_justify_fractions = {
		START: 0.0,
		CENTER: 0.5,
		END: 1.0,
	}

	def __init__(self, x=0, y=0, w=DEFAULT_WIDTH, h=DEFAULT_HEIGHT, visible=True, *,
			axis=HORIZONTAL, justification=START, children=(), context=None):
		assert axis in (HORIZONTAL, VERTICAL), ValueError(f"Invalid axis {axis}, must be 0 (horizontal) or 1 (vertical)")
		self.axis = axis
		self._justification = justification
		# Fixed along the axis we manage, elastic across it
		size = (w, h)
		configs = [None, None]
		configs[axis] = SizeConfig.fixed(size[axis])
		configs[1-axis] = SizeConfig.elastic(size[1-axis])
		super().__init__(x, y, w, h, visible, children=children,
			w_config=configs[0], h_config=configs[1], context=context)

	@property
	def justification(self):
		return self._justification

	@justification.setter
	def justification(self, value):
		if value != self._justification:
			self._justification = value
			self.damage_all()

	def set_size(self, axis: int, value) -> None:
		# Our primary axis size is imposed on us, so it also pins our config there
		if axis != self.axis:
			super().set_size(axis, value)
			return
		if value != self._size[axis]:
			self.damage_all()
			self._size[axis] = value
			self._config[axis] = SizeConfig.fixed(value)
			self.damage_all()

	# --- sizing

	def _do_local_sizing(self) -> None:
		"""Derive our size configs from our children's (which must be up to date)."""
		axis, cross = self.axis, 1 - self.axis
		natural = minim = maxim = 0
		cross_natural = cross_minim = cross_maxim = 0
		for child in self.children:
			config = child.get_config(axis)
			natural += config.natural
			minim += config.minim
			maxim += config.maxim

			cross_config = child.get_config(cross)
			cross_natural = max(cross_natural, cross_config.natural)
			cross_minim = max(cross_minim, cross_config.minim)
			cross_maxim = max(cross_maxim, cross_config.maxim)

		self._config[axis] = SizeConfig(natural, minim, maxim)
		self._config[cross] = SizeConfig(cross_natural, cross_minim, cross_maxim)

	# --- primary axis adjustment

	def _classify_children(self):
		"""Split the children into (springs, others), preserving order."""
		springs, others = [], []
		for child in self.children:
			(springs if child.is_spring else others).append(child)
		return springs, others

	def _measure_children(self, springs, others):
		"""Measure the children in preparation for adjusting sizes.

		Returns:
			tuple: (nat_sum, avail_compr, num_springs)
			- nat_sum: sum of the natural sizes of the non-spring children
			- avail_compr: total compressibility (natural - minim) of the non-spring children
			- num_springs: number of springs among the children
		"""
		nat_sum = 0
		avail_compr = 0
		for child in others:
			config = child.get_config(self.axis)
			nat_sum += config.natural
			avail_compr += config.compressibility
		return nat_sum, avail_compr, len(springs)

	def _adjust_children(self) -> None:
		"""Set every child's primary axis size from the space we have been given."""
		axis = self.axis
		springs, others = self._classify_children()
		nat_sum, avail_compr, num_springs = self._measure_children(springs, others)

		excess = self.get_size(axis) - nat_sum
		if excess >= 0:
			self._set_natural_sizes(others)
			self._expand_child_springs(springs, excess, num_springs)
			return

		# Shortfall: springs give up everything first
		for spring in springs:
			spring.set_size(axis, 0)

		if avail_compr == 0:
			# Nothing can compress, we'll clip past the last child
			self._set_natural_sizes(others)
			return

		# Any remainder beyond what can compress clips past the last child
		shortfall = min(avail_compr, -excess)
		self._compress_children(others, shortfall, avail_compr)

	def _set_natural_sizes(self, children) -> None:
		for child in children:
			child.set_size(self.axis, child.get_config(self.axis).natural)

	def _expand_child_springs(self, springs, excess, num_springs) -> None:
		"""Share `excess` evenly among the springs (does nothing if there are none)."""
		if num_springs == 0:
			return
		each = excess / num_springs
		for spring in springs:
			spring.set_size(self.axis, each)

	def _compress_children(self, others, shortfall, avail_compr) -> None:
		"""Take `shortfall` out of the non-spring children.

		Each child covers the fraction of the shortfall equal to its fraction of the
		total compressibility. `shortfall` must already be clamped to `avail_compr`.
		"""
		axis = self.axis
		for child in others:
			config = child.get_config(axis)
			fraction = config.compressibility / avail_compr
			# max() only guards against floating point overshoot
			child.set_size(axis, max(config.minim, config.natural - fraction * shortfall))

	# --- placement

	def _complete_local_layout(self) -> None:
		"""Size and position our immediate children within our current size."""
		if not self.children:
			return
		axis, cross = self.axis, 1 - self.axis

		self._adjust_children()

		# Cross axis: natural sizes, then shrink-wrap to the largest
		cross_size = 0
		for child in self.children:
			child.set_size(cross, child.get_config(cross).natural)
			cross_size = max(cross_size, child.get_size(cross))
		self.set_size(cross, cross_size)

		fraction = self._justify_fractions.get(self._justification, 0.0) if isinstance(self._justification, str) else 0.0
		offset = 0
		for child in self.children:
			child.set_position(axis, offset)
			offset += child.get_size(axis)
			child.set_position(cross, (cross_size - child.get_size(cross)) * fraction)


class Row(AxisBox):
	"""Stacks children left to right, sized in width by springs and struts layout.

	A Row must be given its width, either by its parent during layout or directly.
	Its height shrink-wraps the tallest child, and children are top, center or bottom
	justified within it (see h_justification).
	"""

	TOP = 'top'
	BOTTOM = 'bottom'

	_justify_fractions = {**AxisBox._justify_fractions, TOP: 0.0, BOTTOM: 1.0}

	def __init__(self, x=0, y=0, w=DEFAULT_WIDTH, h=DEFAULT_HEIGHT, visible=True, *,
			justification=TOP, children=(), context=None):
		super().__init__(x, y, w, h, visible, axis=HORIZONTAL,
			justification=justification, children=children, context=context)

	@property
	def h_justification(self):
		return self.justification

	@h_justification.setter
	def h_justification(self, value):
		self.justification = value


class Column(AxisBox):
	"""Stacks children top to bottom, sized in height by springs and struts layout.

	A Column must be given its height, either by its parent during layout or directly.
	Its width shrink-wraps the widest child, and children are left, center or right
	justified within it (see w_justification).
	"""

	LEFT = 'left'
	RIGHT = 'right'

	_justify_fractions = {**AxisBox._justify_fractions, LEFT: 0.0, RIGHT: 1.0}

	def __init__(self, x=0, y=0, w=DEFAULT_WIDTH, h=DEFAULT_HEIGHT, visible=True, *,
			justification=LEFT, children=(), context=None):
		super().__init__(x, y, w, h, visible, axis=VERTICAL,
			justification=justification, children=children, context=context)

	@property
	def w_justification(self):
		return self.justification

	@w_justification.setter
	def w_justification(self, value):
		self.justification = value
