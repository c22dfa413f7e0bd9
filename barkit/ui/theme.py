"""
barkit visual design system.

All colors as named constants, plus the console Theme.
Import from here — never hardcode markup strings in other modules.

One 24-bit palette, chosen to read on both dark and light backgrounds.
Rich honours NO_COLOR and TERM=dumb on its own.
"""

from rich.theme import Theme


# ── Color palette ─────────────────────────────────────────────────────────────

COLOR_ERROR = "#E05252"      # Warm severity red
COLOR_DIM   = "#787878"      # Medium gray

PROGRESS_BAR_COLOR      = "#5B8DD4"
PROGRESS_COMPLETE_COLOR = "#4DBD74"


# ── Rich Theme ────────────────────────────────────────────────────────────────

BARKIT_THEME = Theme(
    {
        "error": f"{COLOR_ERROR} bold",
        "dim":   COLOR_DIM,
    }
)
