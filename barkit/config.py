"""
Config file loading for barkit.

Reads ~/.config/barkit/config.toml and returns bar defaults for the CLI.
Never raises — always returns a valid dict with sensible defaults.
"""

from pathlib import Path

_CONFIG_PATH = Path.home() / ".config" / "barkit" / "config.toml"

DEFAULT_WIDTH = 22
DEFAULT_DELIMITERS = ("[", "]")


def _defaults() -> dict:
    return {"width": DEFAULT_WIDTH, "delimiters": DEFAULT_DELIMITERS}


def load_config(path: Path | None = None) -> dict:
    """
    Load and return barkit config from TOML file.

    Returns {"width": int, "delimiters": (str, str)} — always valid, never
    raises. Missing file or parse errors return the defaults; a bad value
    for one key falls back for that key only.
    """
    config_path = path or _CONFIG_PATH
    config = _defaults()

    if not config_path.is_file():
        return config

    try:
        raw = config_path.read_bytes()
    except OSError:
        return config

    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            return config

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except Exception:
        return config

    width = data.get("width")
    # bool is an int subclass; `width = true` is not a width
    if isinstance(width, int) and not isinstance(width, bool) and width >= 2:
        config["width"] = width

    delimiters = data.get("delimiters")
    if isinstance(delimiters, str) and len(delimiters) >= 2:
        config["delimiters"] = (delimiters[0], delimiters[1])

    return config
