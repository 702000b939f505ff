"""
Cinex - cutscene EXPORT format toolkit.

Reads and writes the fixed-schema text format the game engine consumes for
cinema (cutscene) records: shots, sync points, typed actions, participants,
and keyframed camera paths.
"""

__version__ = "0.1.0"
