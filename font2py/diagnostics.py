"""Sinks for the non-fatal observations made while parsing glyph paths."""

import logging
from typing import List, NamedTuple, Optional

logger = logging.getLogger(__name__)


def _label(value: Optional[str]) -> str:
    return "<nil>" if value is None else repr(value)


class Diagnostics:
    """Receives parse observations. The base class discards them."""

    def override_used(self, glyph_id: Optional[str], path: str) -> None:
        pass

    def polarity_mismatch(
        self, glyph_id: Optional[str], close_count: int, polarity: Optional[str]
    ) -> None:
        pass


class LoggingDiagnostics(Diagnostics):
    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def override_used(self, glyph_id, path):
        self.log.warning("using d-orig for glyph %s", _label(glyph_id))

    def polarity_mismatch(self, glyph_id, close_count, polarity):
        self.log.warning(
            "glyph=%s, closes=%d, gerber-lp=%s",
            _label(glyph_id),
            close_count,
            _label(polarity),
        )


class DiagnosticEvent(NamedTuple):
    kind: str  # "override" or "polarity"
    glyph_id: Optional[str]
    detail: tuple


class RecordingDiagnostics(Diagnostics):
    """Keeps every event, optionally forwarding to another sink."""

    def __init__(self, forward: Optional[Diagnostics] = None):
        self.events: List[DiagnosticEvent] = []
        self.forward = forward

    def override_used(self, glyph_id, path):
        self.events.append(DiagnosticEvent("override", glyph_id, (path,)))
        if self.forward is not None:
            self.forward.override_used(glyph_id, path)

    def polarity_mismatch(self, glyph_id, close_count, polarity):
        self.events.append(
            DiagnosticEvent("polarity", glyph_id, (close_count, polarity))
        )
        if self.forward is not None:
            self.forward.polarity_mismatch(glyph_id, close_count, polarity)

    def count(self, kind: str) -> int:
        return sum(1 for event in self.events if event.kind == kind)
