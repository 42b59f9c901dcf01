"""
Board geometry for the smalldoku package. Everything here is computed once
from GRID_SIZE when the module is imported.
"""

import gmpy2

GRID_SIZE = 9
CELL_COUNT = GRID_SIZE * GRID_SIZE
DIGITS = tuple(range(1, GRID_SIZE + 1))

# Number of cells the game erases when a new game starts
DEFAULT_ERASE_COUNT = 5

# A grid needs at least 17 clues to have a unique solution
MAX_ERASE_COUNT = CELL_COUNT - 17

def calculate_box_width(size=GRID_SIZE):
    """Width (and height) of a box. Boxes are square, so the grid size has
    to be a square number.
    """
    assert gmpy2.is_square(size), "size must be a square number"
    return int(gmpy2.isqrt(size))

BOX_WIDTH = calculate_box_width()

def index_to_key(index):
    """Row-major cell index (0-80) to a (row, col) key."""
    return index // GRID_SIZE, index % GRID_SIZE

def box_index(row, col):
    """Boxes are numbered left to right, top to bottom."""
    return col // BOX_WIDTH + (row // BOX_WIDTH) * BOX_WIDTH

def box_keylists(size=GRID_SIZE):
    """Default arg for build_config. Returns one list of keys per box,
    ordered by box index.
    """
    width = calculate_box_width(size)
    keylists = [[] for _ in range(size)]
    for i in range(size):
        for j in range(size):
            keylists[j // width + (i // width) * width].append((i, j))
    return keylists

def build_config(keylistfunc=box_keylists):
    """Create a box configuration for the grid. A config is a dict where each
    key maps to a tuple of keys; the ones that belong to the same box. Each
    key maps to a tuple that contains itself.
    """
    grconfig = {}
    for keylist in keylistfunc():
        keylist = tuple(keylist)
        for key in keylist:
            grconfig[key] = keylist
    return grconfig

def calculate_housekeys(grconfig):
    """Calculate the rows, cols, and boxes attributes. Each is a tuple of
    nine key tuples.
    """
    rows = tuple(tuple((i, j) for j in range(GRID_SIZE)) for i in range(GRID_SIZE))
    cols = tuple(tuple((i, j) for i in range(GRID_SIZE)) for j in range(GRID_SIZE))
    box_list = []
    for key in sorted(grconfig):
        keys = grconfig[key]
        if keys not in box_list:
            box_list.append(keys)
    boxes = tuple(sorted(box_list, key=lambda keys: box_index(*keys[0])))
    return rows, cols, boxes

GRCONFIG = build_config()
ROWS, COLS, BOXES = calculate_housekeys(GRCONFIG)
