from __future__ import annotations

from typing import Optional

from .constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, HORIZONTAL, VERTICAL, ROLE_OTHER, ROLE_SPRING
from .size_config import SizeConfig
from .layout_context import LayoutContext, get_layout_context


class DrawnObject:
	"""Base class for anything that can be placed in a layout tree.

	Position, size and size configuration are all stored as [horizontal, vertical]
	pairs so layout code can work with any axis using [axis] and [1-axis].
	"""

	# How this object takes part in springs and struts layout (see constants.ROLE_*)
	layout_role = ROLE_OTHER

	def __init__(self, x=0, y=0, w=DEFAULT_WIDTH, h=DEFAULT_HEIGHT, visible=True, *,
			w_config: Optional[SizeConfig] = None, h_config: Optional[SizeConfig] = None,
			context: Optional[LayoutContext] = None):
		self._pos = [x, y]
		self._size = [w, h]
		self._config = [
			SizeConfig.fixed(w) if w_config is None else self._check_config(w_config),
			SizeConfig.fixed(h) if h_config is None else self._check_config(h_config),
		]
		self._visible = visible
		self._context = context
		self.parent = None

	def __repr__(self):
		x, y = self._pos
		w, h = self._size
		return f"{self.__class__.__name__}(x={x}, y={y}, w={w}, h={h})"

	@staticmethod
	def _check_config(config):
		if not isinstance(config, SizeConfig):
			raise TypeError(f"Expected a SizeConfig, got {type(config).__name__}: {config!r}")
		return config

	# --- damage

	@property
	def context(self) -> LayoutContext:
		"""The context damage is reported to (the global one unless given explicitly)."""
		return self._context if self._context is not None else get_layout_context()

	def damage_all(self) -> None:
		self.context.damage(self)

	# --- axis access

	def get_position(self, axis: int):
		return self._pos[axis]

	def set_position(self, axis: int, value) -> None:
		if value != self._pos[axis]:
			self._pos[axis] = value
			self.damage_all()

	def get_size(self, axis: int):
		return self._size[axis]

	def set_size(self, axis: int, value) -> None:
		if value != self._size[axis]:
			self.damage_all()
			self._size[axis] = value
			self.damage_all()

	def get_config(self, axis: int) -> SizeConfig:
		return self._config[axis]

	def set_config(self, axis: int, config: SizeConfig) -> None:
		config = self._check_config(config)
		if config != self._config[axis]:
			self._config[axis] = config
			self.damage_all()

	def get_rect(self):
		"""Get the rectangle (x, y, w, h) of this object in its parent's coordinates."""
		return (self._pos[0], self._pos[1], self._size[0], self._size[1])

	# --- named accessors

	@property
	def x(self):
		return self.get_position(HORIZONTAL)

	@x.setter
	def x(self, value):
		self.set_position(HORIZONTAL, value)

	@property
	def y(self):
		return self.get_position(VERTICAL)

	@y.setter
	def y(self, value):
		self.set_position(VERTICAL, value)

	@property
	def w(self):
		return self.get_size(HORIZONTAL)

	@w.setter
	def w(self, value):
		self.set_size(HORIZONTAL, value)

	@property
	def h(self):
		return self.get_size(VERTICAL)

	@h.setter
	def h(self, value):
		self.set_size(VERTICAL, value)

	@property
	def w_config(self) -> SizeConfig:
		return self.get_config(HORIZONTAL)

	@w_config.setter
	def w_config(self, config: SizeConfig):
		self.set_config(HORIZONTAL, config)

	@property
	def h_config(self) -> SizeConfig:
		return self.get_config(VERTICAL)

	@h_config.setter
	def h_config(self, config: SizeConfig):
		self.set_config(VERTICAL, config)

	@property
	def visible(self) -> bool:
		return self._visible

	@visible.setter
	def visible(self, value: bool):
		if value != self._visible:
			self._visible = value
			self.damage_all()

	@property
	def is_spring(self) -> bool:
		return self.layout_role == ROLE_SPRING

	# --- layout passes (leaves have nothing to do)

	def do_sizing(self) -> None:
		"""Bottom-up sizing pass for this object and everything below it."""

	def complete_layout(self) -> None:
		"""Top-down placement pass for this object and everything below it."""


class Group(DrawnObject):
	"""A drawn object that owns an ordered list of children.

	A plain group keeps whatever size configuration it was given and leaves its
	children where they were put. Subclasses override _do_local_sizing() and
	_complete_local_layout() to do real layout.
	"""

	def __init__(self, x=0, y=0, w=DEFAULT_WIDTH, h=DEFAULT_HEIGHT, visible=True, *,
			children=(), w_config=None, h_config=None, context=None):
		super().__init__(x, y, w, h, visible, w_config=w_config, h_config=h_config, context=context)
		self.children = []
		for child in children:
			self.add_child(child)

	# --- child list

	def insert_child(self, index: int, child: DrawnObject) -> DrawnObject:
		if child is self:
			raise ValueError("A group cannot be its own child")
		if child.parent is not None:
			raise ValueError(f"{child!r} already belongs to {child.parent!r}")
		self.children.insert(index, child)
		child.parent = self
		self.damage_all()
		return child

	def add_child(self, child: DrawnObject) -> DrawnObject:
		return self.insert_child(len(self.children), child)

	def remove_child(self, child: DrawnObject) -> None:
		if child.parent is not self:
			raise ValueError(f"{child!r} is not a child of {self!r}")
		self.children.remove(child)
		child.parent = None
		self.damage_all()

	def clear_children(self) -> None:
		if not self.children:
			return
		for child in self.children:
			child.parent = None
		self.children.clear()
		self.damage_all()

	# --- layout passes

	def do_sizing(self) -> None:
		for child in self.children:
			child.do_sizing()
		self._do_local_sizing()

	def complete_layout(self) -> None:
		self._complete_local_layout()
		for child in self.children:
			child.complete_layout()

	def perform_sizing(self) -> None:
		"""Local sizing step; every child must already have been sized."""
		self._do_local_sizing()

	def perform_placement(self) -> None:
		"""Local placement step; our own size must already be final."""
		self._complete_local_layout()

	def _do_local_sizing(self) -> None:
		pass

	def _complete_local_layout(self) -> None:
		pass
