"""Turn a glyph's SVG path data into an ordered list of PathSteps.

The parser walks the unconsumed suffix of the path string, trying the close
command first and a general command with its numeric run second. Anything
else aborts the parse of that glyph.
"""

import logging
from typing import List, Optional, Tuple

from .command_defs import PathStep
from .config import CLOSE_COMMANDS, GENERAL_COMMANDS, WHITESPACE
from .diagnostics import Diagnostics, LoggingDiagnostics
from .errors import UnknownPathCommandError
from .scanner import match_numeric_run, scan_numbers

logger = logging.getLogger(__name__)


def _match_close(d: str, pos: int) -> int:
    """Index past a close command and its trailing whitespace, or -1."""
    if d[pos] not in CLOSE_COMMANDS:
        return -1
    pos += 1
    while pos < len(d) and d[pos] in WHITESPACE:
        pos += 1
    return pos


def _match_command(d: str, pos: int) -> int:
    """Index past a general command letter and its numeric run, or -1.

    At least one number must follow the letter.
    """
    if d[pos] not in GENERAL_COMMANDS:
        return -1
    end = match_numeric_run(d, pos + 1)
    if end == pos + 1:
        return -1
    return end


def parse_path_data(d: str) -> Tuple[List[PathStep], int]:
    """Parse path data, returning the steps and the number of close commands.

    Raises UnknownPathCommandError on the first unrecognized text; no partial
    result is returned in that case.
    """
    steps: List[PathStep] = []
    num_closes = 0
    pos = 0
    while pos < len(d):
        end = _match_close(d, pos)
        if end >= 0:
            steps.append(PathStep(d[pos]))
            num_closes += 1
            pos = end
            continue

        end = _match_command(d, pos)
        if end >= 0:
            parameters = scan_numbers(d[pos + 1 : end])
            steps.append(PathStep(d[pos], tuple(parameters)))
            pos = end
            continue

        raise UnknownPathCommandError(d[pos:])
    return steps, num_closes


def parse_glyph_path(
    d: Optional[str],
    d_orig: Optional[str] = None,
    gerber_lp: Optional[str] = None,
    glyph_id: Optional[str] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> List[PathStep]:
    """Parse one glyph's outline.

    A non-empty ``d_orig`` replaces ``d`` entirely. When a glyph closes more
    than one subpath, ``gerber_lp`` should hold one polarity character per
    close command; a mismatch is reported to ``diagnostics`` but the steps
    are returned unchanged.
    """
    if d is None:
        return []
    if diagnostics is None:
        diagnostics = LoggingDiagnostics()

    if d_orig:
        diagnostics.override_used(glyph_id, d_orig)
        d = d_orig

    steps, num_closes = parse_path_data(d)
    logger.debug(
        "glyph %r: %d steps, %d closes", glyph_id, len(steps), num_closes
    )

    if num_closes > 1 and (gerber_lp is None or len(gerber_lp) != num_closes):
        diagnostics.polarity_mismatch(glyph_id, num_closes, gerber_lp)
    return steps
