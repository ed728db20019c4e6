"""Move directions for the tile puzzle."""

from enum import Enum


class Direction(str, Enum):
    """Direction tiles are pushed towards."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
