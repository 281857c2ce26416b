"""
Games module - Game data used to drive the console.

Each game has its own subpackage with:
- Card definitions
- A game view answering the console's info commands
- Cost rules for payment
"""
