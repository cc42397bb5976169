from typing import NamedTuple, Tuple

from .config import CLOSE_COMMANDS


class PathStep(NamedTuple):
    """A single drawing instruction of a glyph outline.

    There are 20 possible commands, broken up into 6 types, with each
    command having an "absolute" (upper case) and a "relative" (lower
    case) version:

    MoveTo: M, m
    LineTo: L, l, H, h, V, v
    Cubic Bezier Curve: C, c, S, s
    Quadratic Bezier Curve: Q, q, T, t
    Elliptical Arc Curve: A, a
    ClosePath: Z, z
    """

    command: str
    parameters: Tuple[float, ...] = ()

    @property
    def is_close(self) -> bool:
        return self.command in CLOSE_COMMANDS

    def debug_string(self) -> str:
        return " ".join([self.command] + [f"{p:.2f}" for p in self.parameters])
