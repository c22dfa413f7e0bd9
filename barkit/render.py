"""
Progress bar renderer.

Stateless — writes a bar into a caller-owned buffer of single characters.
The caller owns the buffer and decides its width; nothing here allocates,
resizes or prints.

Output (width 12, delimiters "{}", fraction 0.6):  {======    }
"""

import logging
import math
from collections.abc import Iterable, MutableSequence
from decimal import Decimal
from itertools import islice
from numbers import Rational, Real


_log = logging.getLogger(__name__)


# ── Glyphs ────────────────────────────────────────────────────────────────────

FILL_GLYPH = "="
BLANK_GLYPH = " "

# Two cells are always taken by the delimiters.
MIN_BUFFER_LEN = 2


# ── Errors ────────────────────────────────────────────────────────────────────

class RenderError(ValueError):
    """Base class for everything render() refuses to do."""


class BufferTooSmall(RenderError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Buffer has {length} cell(s); a bar needs at least {MIN_BUFFER_LEN}"
        )


class InsufficientDelimiters(RenderError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Expected 2 delimiters, got {count}")


class InvalidDelimiter(RenderError):
    def __init__(self, delimiter: object) -> None:
        self.delimiter = delimiter
        super().__init__(f"Delimiter must be a single character, got {delimiter!r}")


# ── Public API ────────────────────────────────────────────────────────────────

def clamp_fraction(fraction: Real) -> Real:
    """
    Clamp a completion ratio into [0, 1].

    Out-of-range values are pulled to the nearest bound rather than
    rejected. NaN has no nearest bound and counts as 0.

    Exact inputs (int, Fraction, Decimal) are compared as they are and come
    back in their own type, or as 0 / 1 at the bounds, so no precision is
    lost and integers too large for a float still clamp. Everything else
    is converted to float.
    """
    if isinstance(fraction, (Rational, Decimal)):
        if isinstance(fraction, Decimal) and fraction.is_nan():
            return 0
        if fraction <= 0:
            return 0
        if fraction >= 1:
            return 1
        return fraction

    value = float(fraction)
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


def fill_count(interior: int, fraction: Real) -> int:
    """
    Number of interior cells that get the fill glyph.

    floor(interior × fraction), after clamping, so the result is always in
    [0, interior]. A negative interior means the buffer had fewer than two
    cells and raises BufferTooSmall.
    """
    if interior < 0:
        raise BufferTooSmall(interior + MIN_BUFFER_LEN)
    return math.floor(interior * clamp_fraction(fraction))


def render(
    buffer: MutableSequence[str],
    delimiters: Iterable[str],
    fraction: Real,
    *,
    logger: logging.Logger | None = None,
) -> None:
    """
    Write a progress bar into buffer, in place.

    Args:
        buffer:     mutable sequence of N ≥ 2 one-character cells.
        delimiters: left and right glyphs; extra items are ignored.
        fraction:   completion ratio, clamped to [0, 1].
        logger:     where the debug record goes (module logger if None).

    Raises:
        BufferTooSmall:         len(buffer) < 2
        InsufficientDelimiters: fewer than two delimiters
        InvalidDelimiter:       a delimiter that is not exactly one character

    Validation happens before the first write, so on failure the buffer
    is exactly as the caller left it.
    """
    log = logger or _log

    length = len(buffer)
    if length < MIN_BUFFER_LEN:
        raise BufferTooSmall(length)

    pair = tuple(islice(delimiters, 2))
    if len(pair) < 2:
        raise InsufficientDelimiters(len(pair))
    for delimiter in pair:
        if not isinstance(delimiter, str) or len(delimiter) != 1:
            raise InvalidDelimiter(delimiter)
    left, right = pair

    interior = length - MIN_BUFFER_LEN
    filled = fill_count(interior, fraction)
    log.debug("render: width=%d interior=%d filled=%d", length, interior, filled)

    buffer[0] = left
    for i in range(1, length - 1):
        buffer[i] = FILL_GLYPH if i <= filled else BLANK_GLYPH
    buffer[length - 1] = right


def render_text(
    width: int,
    delimiters: Iterable[str],
    fraction: Real,
    *,
    logger: logging.Logger | None = None,
) -> str:
    """Allocate a width-cell buffer, render into it and return the string."""
    if width < MIN_BUFFER_LEN:
        raise BufferTooSmall(width)
    buffer = [BLANK_GLYPH] * width
    render(buffer, delimiters, fraction, logger=logger)
    return "".join(buffer)
