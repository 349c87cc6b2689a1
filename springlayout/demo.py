"""
Demo layouts and a command line front end for the springlayout engine.

	springlayout-demo demo strut-spring
	springlayout-demo demo compress --width 12
	springlayout-demo file my_layout.json --height 200
"""

import sys, argparse

from .axis_box import Row, Column
from .drawn_object import DrawnObject, Group
from .fillers import Spring, Strut
from .layout_context import get_layout_context
from .layout_file import load_layout
from .size_config import SizeConfig


def _format_number(value):
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	return f"{value:g}" if isinstance(value, float) else str(value)

def dump_layout(obj, indent="") -> list[str]:
	"""Describe `obj` and everything below it, one indented line per object."""
	x, y, w, h = map(_format_number, obj.get_rect())
	lines = [f"{indent}{obj.__class__.__name__}: x={x}, y={y}, w={w}, h={h}"]
	if isinstance(obj, Group):
		for child in obj.children:
			lines.extend(dump_layout(child, indent + "  "))
	return lines

# -------
# Demo layouts
# -------

def build_strut_spring_row():
	"""A 100 wide row: 20 of strut either side of a spring."""
	return Row(w=100, children=(
		Strut(w=20, h=10),
		Spring(),
		Strut(w=20, h=6),
	))

def build_compress_row():
	"""A 10 wide row of two compressible boxes that would naturally need 16."""
	return Row(w=10, children=(
		DrawnObject(w_config=SizeConfig(8, 2, 8), h_config=SizeConfig.fixed(5)),
		DrawnObject(w_config=SizeConfig(8, 4, 8), h_config=SizeConfig.fixed(3)),
	))

def build_centered_column():
	"""A column of boxes of different widths, centered across the widest."""
	return Column(h=60, justification=Column.CENTER, children=(
		DrawnObject(w=50, h=10),
		Spring(),
		DrawnObject(w=20, h=10),
		Strut.vertical(5),
		Row(w=30, justification=Row.BOTTOM, children=(
			DrawnObject(w=10, h=4),
			Spring(),
			DrawnObject(w=10, h=8),
		)),
	))

DEMOS = {
	'strut-spring': build_strut_spring_row,
	'compress': build_compress_row,
	'centered-column': build_centered_column,
}

# -------
# Command line
# -------

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(
		prog='springlayout-demo',
		description='Lay out a springs and struts tree and print the resulting geometry',
	)
	subparsers = parser.add_subparsers(dest='command', required=True, help='Available commands')

	demo_parser = subparsers.add_parser('demo', help='Lay out one of the built-in demo trees')
	demo_parser.add_argument('name', choices=sorted(DEMOS), help='Which demo to run')

	file_parser = subparsers.add_parser('file', help='Lay out a tree from a JSON description file')
	file_parser.add_argument('path', help='Path to the layout description')

	for sub in (demo_parser, file_parser):
		sub.add_argument('--width', type=float, help="Override the root's width (only a Row manages its width; a Column shrink-wraps it)")
		sub.add_argument('--height', type=float, help="Override the root's height (only a Column manages its height; a Row shrink-wraps it)")

	return parser.parse_args(argv)

def main(argv=None):
	args = parse_arguments(argv)

	if args.command == 'demo':
		root = DEMOS[args.name]()
	else:
		root = load_layout(args.path)
		if root is None:
			print(f"Could not load layout description: {args.path}")
			return 1

	# Only the managed axis of a Row/Column is worth overriding; the other shrink-wraps
	if args.width is not None:
		root.w = args.width
	if args.height is not None:
		root.h = args.height

	get_layout_context().layout(root)
	for line in dump_layout(root):
		print(line)
	return 0

if __name__ == "__main__":
	sys.exit(main())
