# ABOUTME: Weather reporter package: resolves a place name and prints its current weather.
# ABOUTME: Holds the version metadata reported by the --version flag.

__version__ = "0.1.0"
__commit__ = "none"
__build_date__ = "unknown"
