"""Tests for building layouts from descriptions and JSON files."""

import json
import math
import os
import sys
import tempfile
import unittest

# Add the project root to the path so we can import springlayout
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from springlayout.axis_box import Row, Column
from springlayout.drawn_object import DrawnObject
from springlayout.fillers import Spring, Strut
from springlayout.layout_context import LayoutContext, layout_context_class
from springlayout.layout_file import build_layout, load_layout
from springlayout.size_config import SizeConfig

TOOLBAR = {
	"type": "row", "w": 100, "justification": "center",
	"children": [
		{"type": "strut", "w": 20, "h": 4},
		{"type": "spring"},
		{"type": "box", "w_config": [8, 2, None], "h_config": 10},
	],
}


class TestBuildLayout(unittest.TestCase):
	def setUp(self):
		self.context = layout_context_class(LayoutContext)

	def test_build_row(self):
		row = build_layout(TOOLBAR)
		self.assertIsInstance(row, Row)
		self.assertEqual(row.w, 100)
		self.assertEqual(row.justification, Row.CENTER)
		strut, spring, item = row.children
		self.assertIsInstance(strut, Strut)
		self.assertIsInstance(spring, Spring)
		self.assertIsInstance(item, DrawnObject)
		self.assertEqual(item.w_config, SizeConfig(8, 2, math.inf))
		self.assertEqual(item.h_config, SizeConfig.fixed(10))
		self.assertEqual((item.w, item.h), (8, 10))
		self.assertTrue(all(child.parent is row for child in row.children))

	def test_built_tree_lays_out(self):
		row = build_layout(TOOLBAR)
		self.context.layout(row)
		strut, spring, item = row.children
		self.assertEqual(spring.w, 72)
		self.assertEqual(item.x, 92)
		self.assertEqual(row.h, 10)
		self.assertEqual(strut.y, 3)

	def test_build_column_defaults(self):
		column = build_layout({"type": "column", "h": 50, "children": [{"type": "box"}]})
		self.assertIsInstance(column, Column)
		self.assertEqual(column.justification, Column.LEFT)
		self.assertEqual(column.h_config, SizeConfig.fixed(50))
		self.assertEqual(len(column.children), 1)

	def test_explicit_context(self):
		private = LayoutContext()
		row = build_layout(TOOLBAR, private)
		self.assertIs(row.context, private)
		self.assertIs(row.children[0].context, private)

	def test_unknown_type(self):
		with self.assertRaises(ValueError):
			build_layout({"type": "grid"})
		with self.assertRaises(ValueError):
			build_layout({})


class TestLoadLayout(unittest.TestCase):
	def setUp(self):
		layout_context_class(LayoutContext)
		self.temp_dir = tempfile.TemporaryDirectory()
		self.addCleanup(self.temp_dir.cleanup)

	def write(self, name, text):
		path = os.path.join(self.temp_dir.name, name)
		with open(path, "wt") as f:
			f.write(text)
		return path

	def test_load_layout(self):
		path = self.write("toolbar.json", json.dumps(TOOLBAR))
		row = load_layout(path)
		self.assertIsInstance(row, Row)
		self.assertEqual(len(row.children), 3)

	def test_missing_file(self):
		self.assertIsNone(load_layout(os.path.join(self.temp_dir.name, "missing.json")))

	def test_invalid_json(self):
		path = self.write("broken.json", "{ not json")
		self.assertIsNone(load_layout(path))


if __name__ == '__main__':
	unittest.main(verbosity=2)
