"""Records for an SVG webfont document and the loader that fills them."""

import logging
import re
from typing import Iterable, List, Optional, Tuple

from fontTools.misc import etree

from .command_defs import PathStep
from .config import SVG_NAMESPACE
from .diagnostics import Diagnostics
from .errors import PathError, WebfontError
from .pathparser import parse_glyph_path

logger = logging.getLogger(__name__)

XML_DECLARATION = re.compile(r"^\s*<\?xml\b[^>]*\?>")


class FontFace:
    units_per_em: int
    ascent: int
    descent: int

    def __init__(self, units_per_em: int = 0, ascent: int = 0, descent: int = 0):
        self.units_per_em = units_per_em
        self.ascent = ascent
        self.descent = descent


class MissingGlyph:
    horiz_adv_x: int

    def __init__(self, horiz_adv_x: int = 0):
        self.horiz_adv_x = horiz_adv_x


class Glyph:
    """A <glyph> element of the webfont.

    ``d`` is parsed on demand into ``path_steps``. ``d_orig`` takes
    precedence over ``d`` when non-empty, and ``gerber_lp`` carries one
    layer polarity character per closed subpath.
    """

    horiz_adv_x: int
    unicode: Optional[str]
    d: Optional[str]
    d_orig: Optional[str]
    gerber_lp: Optional[str]
    path_steps: List[PathStep]

    def __init__(
        self,
        horiz_adv_x: int = 0,
        unicode: Optional[str] = None,
        d: Optional[str] = None,
        d_orig: Optional[str] = None,
        gerber_lp: Optional[str] = None,
    ):
        self.horiz_adv_x = horiz_adv_x
        self.unicode = unicode
        self.d = d
        self.d_orig = d_orig
        self.gerber_lp = gerber_lp
        self.path_steps = []

    def __repr__(self):
        return f"Glyph(unicode={self.unicode!r}, steps={len(self.path_steps)})"

    def parse_path(self, diagnostics: Optional[Diagnostics] = None) -> List[PathStep]:
        # Only assign once the whole path has parsed.
        steps = parse_glyph_path(
            self.d,
            d_orig=self.d_orig,
            gerber_lp=self.gerber_lp,
            glyph_id=self.unicode,
            diagnostics=diagnostics,
        )
        self.path_steps = steps
        return steps


class Font:
    id: str
    horiz_adv_x: int
    font_face: Optional[FontFace]
    missing_glyph: Optional[MissingGlyph]
    glyphs: List[Glyph]

    def __init__(
        self,
        id: str = "",
        horiz_adv_x: int = 0,
        font_face: Optional[FontFace] = None,
        missing_glyph: Optional[MissingGlyph] = None,
        glyphs: Optional[List[Glyph]] = None,
    ):
        self.id = id
        self.horiz_adv_x = horiz_adv_x
        self.font_face = font_face
        self.missing_glyph = missing_glyph
        self.glyphs = glyphs if glyphs is not None else []

    def parse_paths(
        self,
        skip_errors: bool = False,
        diagnostics: Optional[Diagnostics] = None,
        glyphs: Optional[Iterable[Glyph]] = None,
    ) -> List[Tuple[Glyph, PathError]]:
        """Parse every glyph's path.

        With ``skip_errors`` false the first failure propagates. Otherwise
        failing glyphs keep no steps and are returned with their errors.
        ``glyphs`` lets the caller wrap the iteration, e.g. in a progress bar.
        """
        failures = []
        for glyph in self.glyphs if glyphs is None else glyphs:
            try:
                glyph.parse_path(diagnostics)
            except PathError as e:
                if not skip_errors:
                    raise
                logger.error("Skipping glyph %r: %s", glyph.unicode, e)
                glyph.path_steps = []
                failures.append((glyph, e))
        return failures


class FontData:
    font: Font

    def __init__(self, font: Font):
        self.font = font


def _local_name(tag) -> Optional[str]:
    # Comments and processing instructions have non-string tags
    if not isinstance(tag, str):
        return None
    if tag.startswith("{"):
        namespace, _, name = tag[1:].partition("}")
        if namespace != SVG_NAMESPACE:
            return None
        return name
    return tag


def _child(element, name: str):
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _children(element, name: str):
    return [child for child in element if _local_name(child.tag) == name]


def _int_attr(element, name: str) -> int:
    value = element.get(name)
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        raise WebfontError(
            f"<{_local_name(element.tag)}> attribute {name}={value!r} is not an integer"
        ) from None


def _read_glyph(element) -> Glyph:
    return Glyph(
        horiz_adv_x=_int_attr(element, "horiz-adv-x"),
        unicode=element.get("unicode"),
        d=element.get("d"),
        d_orig=element.get("d-orig"),
        gerber_lp=element.get("gerber-lp"),
    )


def _read_font(element) -> Font:
    font = Font(
        id=element.get("id", ""),
        horiz_adv_x=_int_attr(element, "horiz-adv-x"),
    )
    face = _child(element, "font-face")
    if face is not None:
        font.font_face = FontFace(
            units_per_em=_int_attr(face, "units-per-em"),
            ascent=_int_attr(face, "ascent"),
            descent=_int_attr(face, "descent"),
        )
    missing = _child(element, "missing-glyph")
    if missing is not None:
        font.missing_glyph = MissingGlyph(_int_attr(missing, "horiz-adv-x"))
    font.glyphs = [_read_glyph(g) for g in _children(element, "glyph")]
    return font


def from_element(root) -> FontData:
    defs = _child(root, "defs")
    font = _child(defs, "font") if defs is not None else None
    if font is None:
        raise WebfontError("webfont has no <defs><font> element")
    data = FontData(_read_font(font))
    logger.info("Loaded font %r with %d glyphs", data.font.id, len(data.font.glyphs))
    return data


def from_string(text) -> FontData:
    """Load an SVG webfont from bytes or an already decoded string.

    A string is parsed as already decoded text; its XML declaration is dropped.
    """
    if isinstance(text, str):
        text = XML_DECLARATION.sub("", text, count=1)
    try:
        root = etree.fromstring(text)
    except etree.ParseError as e:
        raise WebfontError(f"malformed webfont: {e}") from e
    return from_element(root)


def load_webfont(source) -> FontData:
    """Load an SVG webfont from a path or file object."""
    try:
        tree = etree.parse(source)
    except etree.ParseError as e:
        raise WebfontError(f"malformed webfont {source}: {e}") from e
    return from_element(tree.getroot())
