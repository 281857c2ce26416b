"""
rftg-tui - Console choice resolution for a tableau-building card game.

The package is the text front end that sits between a single local player
and an external game engine. It provides:
- A command router for the meta-commands shared by every prompt
- An enumerated choice prompt (the single-selection primitive)
- Pool selectors for discard/keep/consume style decisions
- A dual-pool payment resolver
- Read-only card, tableau and score renderers
"""

__version__ = "0.1.0"
