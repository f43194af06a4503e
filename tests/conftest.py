"""Shared test fixtures."""

from __future__ import annotations

import pytest

from document import load_image_string


# triangle01 from the SVG 1.1 path chapter, without the closing z
TRIANGLE_SVG = '''<?xml version="1.0" standalone="no"?>
<svg width="4cm" height="4cm" viewBox="0 0 400 400" xmlns="http://www.w3.org/2000/svg" version="1.1">
  <title>Example triangle01- simple example of a 'path'</title>
  <desc>A path that draws a triangle</desc>
  <rect x="1" y="1" width="398" height="398" fill="none" stroke="blue" />
  <path d="M 100 100 L 300 100 L 200 300" fill="red" stroke="blue" stroke-width="3" />
</svg>'''

CUBIC_SVG = '''<svg width="100" height="100" xmlns="http://www.w3.org/2000/svg">
  <path d="M0 0 C 0 10 10 10 10 0" stroke="#0000ff"/>
</svg>'''

GROUP_SVG = '''<svg viewBox="0 0 50 50" xmlns="http://www.w3.org/2000/svg">
  <!-- inherited fill -->
  <g style="fill:#00ff00;stroke:black">
    <path d="M0 0 L10 0 L10 10"/>
    <g style="display:none">
      <rect x="0" y="0" width="5" height="5" fill="red"/>
    </g>
  </g>
</svg>'''

SHAPES_SVG = '''<svg width="20mm" height="20mm" viewBox="0,0,80,80" xmlns="http://www.w3.org/2000/svg">
  <metadata><creator id="x"/></metadata>
  <defs><linearGradient id="grad"/></defs>
  <polyline points="0,0 10,10 20,0" stroke="red"/>
  <circle cx="40" cy="40" r="10" fill="#123456" stroke="red" stroke-width="2"/>
</svg>'''


@pytest.fixture
def triangle_svg() -> str:
    return TRIANGLE_SVG


@pytest.fixture
def triangle_image():
    return load_image_string(TRIANGLE_SVG)


@pytest.fixture
def cubic_image():
    return load_image_string(CUBIC_SVG)


@pytest.fixture
def group_image():
    return load_image_string(GROUP_SVG)


@pytest.fixture
def shapes_image():
    return load_image_string(SHAPES_SVG)
