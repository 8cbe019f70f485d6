"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


# --- The domain layer keeps its own Color (src/othello/cell.py) with rules-specific behaviour (opposite, random pick).
# --- NOTE Same names are used on purpose: the imports show which version is used in what part of the code


class Color(StrEnum):
    DARK = "dark"
    LIGHT = "light"


class Difficulty(StrEnum):
    EASY = "easy"
    NORMAL = "normal"


class PlayerKind(StrEnum):
    HUMAN = "human"
    AUTOMATED = "automated"
