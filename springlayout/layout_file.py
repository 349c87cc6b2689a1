"""
Layout descriptions: building object trees from plain dicts and JSON files.

A description is a dict with a "type" key and optional geometry:

	{"type": "row", "w": 100, "justification": "center", "children": [
		{"type": "strut", "w": 20},
		{"type": "spring"},
		{"type": "box", "w_config": [8, 2, 10], "h_config": [5, 5, 5]}
	]}

Box configs are [natural, minim, maxim]; a null maxim means unbounded.
"""

import json
import math

from .axis_box import Row, Column
from .constants import DEFAULT_WIDTH, DEFAULT_HEIGHT
from .drawn_object import DrawnObject
from .fillers import Spring, Strut
from .size_config import SizeConfig


def _config_from(value):
	if value is None:
		return None
	if isinstance(value, (int, float)):
		return SizeConfig.fixed(value)
	natural, minim, maxim = value
	return SizeConfig(natural, minim, math.inf if maxim is None else maxim)

def _build_box(description, context):
	w_config = _config_from(description.get('w_config'))
	h_config = _config_from(description.get('h_config'))
	w = description.get('w', w_config.natural if w_config else DEFAULT_WIDTH)
	h = description.get('h', h_config.natural if h_config else DEFAULT_HEIGHT)
	return DrawnObject(description.get('x', 0), description.get('y', 0), w, h,
		w_config=w_config, h_config=h_config, context=context)

def _build_axis_box(box_class, description, context):
	kwargs = {}
	if 'justification' in description:
		kwargs['justification'] = description['justification']
	return box_class(
		description.get('x', 0), description.get('y', 0),
		description.get('w', DEFAULT_WIDTH), description.get('h', DEFAULT_HEIGHT),
		children=[build_layout(child, context) for child in description.get('children', ())],
		context=context, **kwargs)

def build_layout(description, context=None):
	"""Build a drawn object (and its children) from a layout description dict."""
	kind = description.get('type')
	if kind == 'row':
		return _build_axis_box(Row, description, context)
	elif kind == 'column':
		return _build_axis_box(Column, description, context)
	elif kind == 'spring':
		return Spring(context=context)
	elif kind == 'strut':
		return Strut(description.get('w', 0), description.get('h', 0), context=context)
	elif kind == 'box':
		return _build_box(description, context)
	raise ValueError(f"Unknown layout type: {kind!r}")

def load_layout(path, context=None):
	"""Load a layout description file, returning None if it is missing or not valid JSON."""
	try:
		with open(path, "rt") as f:
			description = json.load(f)
	except (FileNotFoundError, json.JSONDecodeError):
		return None
	return build_layout(description, context)
