from __future__ import annotations

import math


class SizeConfig(tuple):
	"""Sizing constraints of an object along one axis.

	An immutable (natural, minim, maxim) triple with minim <= natural <= maxim.
	Objects never edit a config in place; they replace the whole thing.
	"""

	__slots__ = ()

	def __new__(cls, natural=0, minim=0, maxim=math.inf):
		natural, minim, maxim = (int(v) if isinstance(v, bool) else v for v in (natural, minim, maxim))
		for name, value in (('natural', natural), ('minim', minim), ('maxim', maxim)):
			assert isinstance(value, (int, float)), \
				f"SizeConfig {name} must be a number, got {type(value).__name__}: {value}"
		assert 0 <= minim <= natural <= maxim, \
			f"SizeConfig requires 0 <= minim <= natural <= maxim, got ({natural}, {minim}, {maxim})"
		return tuple.__new__(cls, (natural, minim, maxim))

	@classmethod
	def fixed(cls, value):
		"""A config that can only ever be `value` in size."""
		return cls(value, value, value)

	@classmethod
	def elastic(cls, value):
		"""A config that prefers `value` but can take any size from 0 upward."""
		return cls(value, 0, math.inf)

	@property
	def natural(self):
		return self[0]

	@property
	def minim(self):
		return self[1]

	@property
	def maxim(self):
		return self[2]

	@property
	def compressibility(self):
		"""How much this config can give up under shortfall (natural - minim)."""
		return self[0] - self[1]

	def __repr__(self):
		natural, minim, maxim = self
		if natural == minim == maxim:
			return f"SizeConfig.fixed({natural})"
		if minim == 0 and maxim == math.inf:
			return f"SizeConfig.elastic({natural})"
		return f"SizeConfig(natural={natural}, minim={minim}, maxim={maxim})"
