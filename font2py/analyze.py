import argparse
import logging
import sys
from collections import Counter

import numpy as np
from tqdm import tqdm

from font2py.config import DEFAULT_LOG_LEVEL, LOG_FORMAT
from font2py.diagnostics import LoggingDiagnostics, RecordingDiagnostics
from font2py.errors import PathError, WebfontError
from font2py.webfont import load_webfont

logger = logging.getLogger(__name__)


def analyze_webfont(font_path, skip_errors=False, progress=True):
    """
    Loads an SVG webfont, parses every glyph outline and prints a summary
    of the commands found. Returns the process exit code.
    """
    try:
        font = load_webfont(font_path).font
    except (OSError, WebfontError) as e:
        print(f"Could not load {font_path}: {e}", file=sys.stderr)
        return 2

    diagnostics = RecordingDiagnostics(forward=LoggingDiagnostics())
    glyphs = tqdm(font.glyphs, desc="Parsing glyphs", disable=not progress)
    try:
        failures = font.parse_paths(
            skip_errors=skip_errors, diagnostics=diagnostics, glyphs=glyphs
        )
    except PathError as e:
        print(f"Aborting: {e}", file=sys.stderr)
        return 2

    command_histogram = Counter()
    num_subpaths = 0
    for glyph in font.glyphs:
        command_histogram.update(step.command for step in glyph.path_steps)
        num_subpaths += sum(step.is_close for step in glyph.path_steps)
        logger.debug(
            "%r: %s",
            glyph.unicode,
            " ".join(step.debug_string() for step in glyph.path_steps),
        )
    step_counts = np.array([len(g.path_steps) for g in font.glyphs], dtype=np.int64)

    units_per_em = font.font_face.units_per_em if font.font_face else 0
    print(f"Font: {font.id!r} ({units_per_em} units per em)")
    print(f"Glyphs: {len(font.glyphs)}")
    if len(step_counts):
        print(
            f"Steps per glyph: \tMean: {step_counts.mean():.2f}, \tMax: {step_counts.max()}"
        )
    print(f"Closed subpaths: {num_subpaths}")
    print(f"Polarity warnings: {diagnostics.count('polarity')}")
    print(f"d-orig substitutions: {diagnostics.count('override')}")

    print("\n--- Command Histogram ---")
    for cmd, count in sorted(command_histogram.items(), key=lambda x: x[0]):
        print(f"{cmd}: {count}")

    if failures:
        print(f"\n--- Failures ({len(failures)}) ---")
        for glyph, error in failures:
            print(f"{glyph.unicode!r}: {error}")
        return 1
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Parse the glyph outlines of an SVG webfont."
    )
    parser.add_argument("font", help="Path to the SVG webfont.")
    parser.add_argument(
        "--skip-errors",
        action="store_true",
        help="Skip glyphs whose path data cannot be parsed instead of aborting.",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not show a progress bar.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    args = parser.parse_args(argv)

    level = DEFAULT_LOG_LEVEL
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("font2py").setLevel(level)

    return analyze_webfont(
        args.font, skip_errors=args.skip_errors, progress=not args.no_progress
    )


if __name__ == "__main__":
    sys.exit(main())
