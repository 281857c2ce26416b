"""
Session Module - The decision points a game asks of a console player.

- ChoiceInterface: abstract decisions called by the engine
- ConsoleInterface: answers them at the text console
- NewGameMenu / GameOptions: option menu shown before a game starts
"""

from .decisions import ChoiceInterface, ConsoleInterface
from .menu import NewGameMenu, GameOptions

__all__ = [
    "ChoiceInterface",
    "ConsoleInterface",
    "NewGameMenu",
    "GameOptions",
]
