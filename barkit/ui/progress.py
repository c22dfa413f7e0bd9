"""
Styled progress bars.

Stateless — takes a fraction or (completed, total), returns a rich Text.
The bar cells themselves come from barkit.render; this module only adds
colour, a percentage and a count.

Output:  [=============         ]  62%  ·  14 of 23
"""

from collections.abc import Sequence

from rich.text import Text

from barkit.render import BLANK_GLYPH, FILL_GLYPH, clamp_fraction, render
from barkit.ui.theme import COLOR_DIM, PROGRESS_BAR_COLOR, PROGRESS_COMPLETE_COLOR


BAR_WIDTH = 22


def render_bar(
    fraction: float,
    width: int = BAR_WIDTH,
    delimiters: Sequence[str] = ("[", "]"),
) -> Text:
    """
    Return just the bar, coloured: fill cells in the bar colour, the rest dim.

    Raises RenderError (via render) for a width below 2 or fewer than two
    delimiters.
    """
    cells = [BLANK_GLYPH] * max(width, 0)
    render(cells, delimiters, fraction)

    done = clamp_fraction(fraction) >= 1.0
    bar_color = PROGRESS_COMPLETE_COLOR if done else PROGRESS_BAR_COLOR

    t = Text()
    t.append(cells[0], style=COLOR_DIM)
    for cell in cells[1:-1]:
        t.append(cell, style=bar_color if cell == FILL_GLYPH else COLOR_DIM)
    t.append(cells[-1], style=COLOR_DIM)
    return t


def render_progress(
    completed: int,
    total: int,
    width: int = BAR_WIDTH,
    delimiters: Sequence[str] = ("[", "]"),
) -> Text:
    """
    Return a styled progress line as a rich Text object.

    Args:
        completed:  number of items finished
        total:      total items
        width:      bar cells including both delimiters
        delimiters: left and right glyphs

    Returns a single-line Text like:
        [=============         ]  62%  ·  14 of 23
    """
    if total == 0:
        return Text("  Nothing to do", style=COLOR_DIM)

    pct = clamp_fraction(completed / total)
    done = pct >= 1.0
    pct_color = f"{PROGRESS_COMPLETE_COLOR} bold" if done else f"bold {PROGRESS_BAR_COLOR}"

    t = render_bar(pct, width=width, delimiters=delimiters)
    t.append(f"  {int(pct * 100):>3}%", style=pct_color)
    t.append(f"  ·  {completed} of {total}", style=COLOR_DIM)

    return t
