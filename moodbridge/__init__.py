"""
moodbridge: move Notion mood-journal exports into Day One.
"""

__version__ = "0.1.0"
