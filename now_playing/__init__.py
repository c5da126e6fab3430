"""Now Playing API"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("now-playing")
except PackageNotFoundError:
    __version__ = "dev"
