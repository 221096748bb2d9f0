"""Shared test fixtures."""

from __future__ import annotations

import pytest


TRIANGLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20" viewBox="0 0 20 20">
  <path id="tri" d="M0 0 L10 0 L10 10 Z"/>
</svg>'''

MIXED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 40 40">
  <path id="wave" d="M0 0 Q5 5 10 0 L20 0 Z"/>
  <path id="hook" fill="none" stroke="black" stroke-width="2" d="M0 20 C0 25 5 30 10 30"/>
</svg>'''

GROUPS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <g id="body" transform="translate(10,20)">
    <path d="M0 0 L1 0 L1 1 Z"/>
    <g>
      <rect id="box" x="0" y="0" width="4" height="2"/>
      <circle cx="5" cy="5" r="1"/>
    </g>
  </g>
  <g id="hidden" display="none">
    <path d="M0 0 L5 5"/>
  </g>
  <path id="ghost" visibility="hidden" d="M0 0 L5 5"/>
  <image id="photo" href="photo.png" width="10" height="10"/>
  <text id="label" x="0" y="0">hello</text>
</svg>'''

STROKED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <polyline points="2 2 6 6 10 2"/>
</svg>'''

# Filled SVG with a stroked outline on one shape
FILLED_COMPLEX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 259">
  <path id="outer" d="M128 10 L240 80 L240 200 L128 249 L16 200 L16 80 Z" fill="#4ECDC4"/>
  <path id="inner" d="M128 50 L200 100 L200 180 L128 220 L56 180 L56 100 Z" fill="#45B7D1" stroke="#000"/>
  <circle id="eye" cx="128" cy="130" r="30" fill="#FF6B6B"/>
  <ellipse cx="100" cy="110" rx="10" ry="5" fill="#FFEAA7"/>
</svg>'''


@pytest.fixture
def triangle_svg() -> str:
    return TRIANGLE_SVG


@pytest.fixture
def mixed_svg() -> str:
    return MIXED_SVG


@pytest.fixture
def groups_svg() -> str:
    return GROUPS_SVG


@pytest.fixture
def stroked_svg() -> str:
    return STROKED_SVG


@pytest.fixture
def filled_complex_svg() -> str:
    return FILLED_COMPLEX_SVG
