"""
Terminal presentation for barkit.

Modules:
  theme.py    — colour constants and the console Theme.
  progress.py — styled progress line built on barkit.render.
"""
