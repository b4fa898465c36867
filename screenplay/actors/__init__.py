"""
Actor module exports.
"""

from screenplay.actors.abilities import AbilityRegistry
from screenplay.actors.actor import Actor
from screenplay.actors.notepad import Notepad

__all__ = [
    "Actor",
    "AbilityRegistry",
    "Notepad",
]
