"""Version information for component-publisher"""

__version__ = "1.0.0"
__version_info__ = tuple(int(part) for part in __version__.split("."))
__author__ = "component-publisher contributors"
__license__ = "MIT"
