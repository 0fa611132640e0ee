"""
Turns world positions into the grid references players see on the map,
like "D5". Columns are lettered left to right (A..Z, AA, AB, ...), rows
numbered top to bottom from 0.
"""

import math

from codealert.constants import GRID_CELL_SIZE


def column_letters(index):
    "Converts a 0-based column index into its letters (0 -> A, 26 -> AA)."
    letters = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def position_to_grid(position, world_size, cell_size=GRID_CELL_SIZE):
    "Returns the grid reference for an (x, y, z) world position."
    x, y, z = position
    half = world_size / 2.0
    cells = max(int(math.floor(world_size / cell_size)), 1)
    # The map origin is its centre; z grows northwards, rows grow southwards.
    column = int(math.floor((x + half) / cell_size))
    row = int(math.floor((half - z) / cell_size))
    column = min(max(column, 0), cells - 1)
    row = min(max(row, 0), cells - 1)
    return "%s%i" % (column_letters(column), row)


def position_to_string(position, world_size=None):
    """
    Human-readable location for chat and webhooks. Falls back to raw
    coordinates when the host can't tell us how big the map is.
    """
    if not world_size:
        return "(%.0f, %.0f, %.0f)" % tuple(position)
    return position_to_grid(position, world_size)
