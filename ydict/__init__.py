"""
ydict - Youdao Dictionary Command-Line Lookup

Look up English words in the Youdao dictionary from the terminal, with
optional Anki flashcard creation and pronunciation playback.
"""

__version__ = "1.0.0"
__author__ = "ydict Contributors"
