from __future__ import annotations

""" Damage tracking and the layout driver.

Objects never re-run layout from inside their own setters. A setter that changes
geometry or justification reports damage to the context the object holds, and the
context decides when the next sizing + placement cycle happens.

Layout cycle:
	1. sizing		bottom-up, every child sized before its parent aggregates it
	2. placement	top-down, every parent places its children before they place theirs
"""

from typing import Optional

from . import constants

# Global layout context - initialized by the @layout_context decorator below
_layout_context: Optional[LayoutContext] = None


def get_layout_context() -> LayoutContext:
	"""Return the global layout context."""
	return _layout_context

def set_layout_context(context: LayoutContext):
	"""Set the global layout context."""
	global _layout_context
	_layout_context = context

def layout_context(context_class):
	"""Decorator to set a layout context class as the global context."""
	set_layout_context(context_class())
	return context_class

def layout_context_class(context_class):
	"""Install a fresh instance of `context_class` as the global context and return it."""
	context = context_class()
	set_layout_context(context)
	return context


@layout_context
class LayoutContext:
	"""Collects damage notifications and drives layout passes over a tree.

	Subclasses can override damage() to forward notifications elsewhere, e.g. to
	schedule a redraw in whatever renders the tree.
	"""

	def __init__(self):
		self.damaged = []
		self.damage_count = 0
		self.needs_layout = False

	def damage(self, obj) -> None:
		"""Record that `obj` has changed in a way that invalidates the current layout."""
		self.damaged.append(obj)
		self.damage_count += 1
		self.needs_layout = True
		if constants.DEBUG_LAYOUT:
			print(f"Damage: {obj!r}")

	def clear(self) -> None:
		self.damaged.clear()
		self.needs_layout = False

	def layout(self, root) -> tuple[float, float]:
		"""Run a complete layout cycle over the tree below `root`.

		Returns:
			tuple: The root's (width, height) after placement
		"""
		if constants.DEBUG_LAYOUT:
			print(f"Layout pass over {root!r}")
		root.do_sizing()
		root.complete_layout()
		# Damage reported by the pass itself belongs to this pass
		self.clear()
		return (root.w, root.h)

	def layout_if_needed(self, root) -> bool:
		"""Run layout() only if something has been damaged since the last pass."""
		if not self.needs_layout:
			return False
		self.layout(root)
		return True
