"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-catalog"
__version__ = "1.0.0"
VERSION = __version__  # Alias for compatibility
DESCRIPTION = "Strategy, Factory Method and Facade pattern catalog"

