"""
Spy Word: a pass-the-device party game of secret words and hidden spies.
"""

__version__ = "0.1.0"
