import pytest

from font2py.command_defs import PathStep
from font2py.diagnostics import RecordingDiagnostics
from font2py.errors import UnknownPathCommandError, WebfontError
from font2py.webfont import Glyph, from_string, load_webfont


def test_load_font_metadata(webfont_text):
    font = from_string(webfont_text).font
    assert font.id == "testfont"
    assert font.horiz_adv_x == 512
    assert font.font_face.units_per_em == 1000
    assert font.font_face.ascent == 800
    assert font.font_face.descent == -200
    assert font.missing_glyph.horiz_adv_x == 500


def test_load_glyph_attributes(webfont_text):
    glyphs = from_string(webfont_text).font.glyphs
    assert [g.unicode for g in glyphs] == ["A", "O", "&", " "]
    assert glyphs[0].horiz_adv_x == 600
    assert glyphs[1].horiz_adv_x == 0
    assert glyphs[1].gerber_lp == "dc"
    assert glyphs[2].d_orig == "M1,1L2,2Z"
    assert glyphs[3].d is None
    assert all(g.path_steps == [] for g in glyphs)


def test_load_from_file(tmp_path, webfont_text):
    path = tmp_path / "font.svg"
    path.write_text(webfont_text)
    font = load_webfont(str(path)).font
    assert len(font.glyphs) == 4


def test_load_without_namespace():
    font = from_string(
        '<svg><defs><font id="plain"><glyph unicode="x" d="Z"/></font></defs></svg>'
    ).font
    assert font.id == "plain"
    assert font.font_face is None
    assert font.missing_glyph is None
    assert font.glyphs[0].d == "Z"


def test_missing_font_element():
    with pytest.raises(WebfontError):
        from_string('<svg xmlns="http://www.w3.org/2000/svg"><defs/></svg>')


def test_bad_integer_attribute():
    with pytest.raises(WebfontError, match="horiz-adv-x"):
        from_string('<svg><defs><font horiz-adv-x="wide"/></defs></svg>')


def test_parse_all_paths(webfont_text):
    font = from_string(webfont_text).font
    diagnostics = RecordingDiagnostics()
    assert font.parse_paths(diagnostics=diagnostics) == []

    a, o, amp, space = font.glyphs
    assert a.path_steps == [
        PathStep("M", (0.0, 0.0)),
        PathStep("L", (300.0, 700.0, 600.0, 0.0)),
        PathStep("Z"),
    ]
    assert len(o.path_steps) == 6
    assert amp.path_steps[0] == PathStep("M", (1.0, 1.0))
    assert space.path_steps == []
    assert [(e.kind, e.glyph_id) for e in diagnostics.events] == [("override", "&")]


def test_batch_aborts_on_first_failure(broken_webfont_text):
    font = from_string(broken_webfont_text).font
    with pytest.raises(UnknownPathCommandError):
        font.parse_paths(diagnostics=RecordingDiagnostics())
    assert font.glyphs[0].path_steps != []
    assert font.glyphs[1].path_steps == []
    assert font.glyphs[2].path_steps == []


def test_batch_skips_failing_glyphs(broken_webfont_text):
    font = from_string(broken_webfont_text).font
    failures = font.parse_paths(skip_errors=True, diagnostics=RecordingDiagnostics())
    assert len(failures) == 1
    glyph, error = failures[0]
    assert glyph.unicode == "O"
    assert error.remainder.startswith("X0,0")
    assert glyph.path_steps == []
    assert font.glyphs[2].path_steps[0] == PathStep("M", (1.0, 1.0))


def test_failed_parse_keeps_previous_steps():
    glyph = Glyph(unicode="q", d="M0,0Z")
    glyph.parse_path()
    glyph.d = "M0,0?"
    with pytest.raises(UnknownPathCommandError):
        glyph.parse_path()
    assert glyph.path_steps == [PathStep("M", (0.0, 0.0)), PathStep("Z")]


def test_malformed_xml():
    with pytest.raises(WebfontError, match="malformed"):
        from_string("<svg><defs><font></defs></svg>")


LATIN1_WEBFONT = (
    '<?xml version="1.0" encoding="ISO-8859-1"?>\n'
    '<svg><defs><font><glyph unicode="é" d="Z"/></font></defs></svg>'
)


def test_decoded_string_ignores_declared_encoding():
    """A str is already decoded, so the declared Latin-1 must not be reapplied."""
    font = from_string(LATIN1_WEBFONT).font
    assert font.glyphs[0].unicode == "é"


def test_bytes_use_declared_encoding():
    font = from_string(LATIN1_WEBFONT.encode("iso-8859-1")).font
    assert font.glyphs[0].unicode == "é"
