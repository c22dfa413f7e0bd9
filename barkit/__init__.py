"""barkit — progress bars and small text/numeric helpers"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("barkit")
except PackageNotFoundError:
    __version__ = "dev"

__author__ = "barkit"
