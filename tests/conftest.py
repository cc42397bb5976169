import logging

import pytest

WEBFONT = """<?xml version="1.0" standalone="no"?>
<svg xmlns="http://www.w3.org/2000/svg">
<metadata>Test font</metadata>
<defs>
<font id="testfont" horiz-adv-x="512">
  <font-face units-per-em="1000" ascent="800" descent="-200" />
  <missing-glyph horiz-adv-x="500" />
  <!-- a comment between glyphs -->
  <glyph unicode="A" horiz-adv-x="600" d="M0,0L300,700 600,0Z" />
  <glyph unicode="O" d="M0,0L10,0 10,10Z M2,2L8,2 8,8Z" gerber-lp="dc" />
  <glyph unicode="&amp;" d="M0,0Z" d-orig="M1,1L2,2Z" />
  <glyph unicode=" " horiz-adv-x="250" />
</font>
</defs>
</svg>
"""

BROKEN_WEBFONT = WEBFONT.replace('unicode="O" d="M0,0', 'unicode="O" d="X0,0')


@pytest.fixture
def webfont_text():
    return WEBFONT


@pytest.fixture
def broken_webfont_text():
    return BROKEN_WEBFONT


@pytest.fixture(autouse=True)
def restore_font2py_log_level():
    package_logger = logging.getLogger("font2py")
    level = package_logger.level
    yield
    package_logger.setLevel(level)
