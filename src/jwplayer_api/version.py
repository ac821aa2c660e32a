"""Version information for the JW Player API client"""

__version__ = "0.1.0"
