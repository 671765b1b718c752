"""String Analyzer Service - analyze, store and filter strings."""

from string_analyzer.config import APP_VERSION

__version__ = APP_VERSION
