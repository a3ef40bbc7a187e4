GRID_SIZE = 6
CELL_SIZE = 80
CELL_GAP = 2
BOARD_TOP_MARGIN = 100

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 700
WINDOW_TITLE = "Queens"

# Board maximum footprint relative to window; cells never shrink below MIN_CELL_SIZE.
BOARD_MAX_WIDTH_PCT = 0.75
BOARD_MAX_HEIGHT_PCT = 0.80
MIN_CELL_SIZE = 20

# Undo button anchored to the lower-left corner: (left, bottom, width, height)
UNDO_BUTTON_RECT = (50, 30, 100, 40)
UNDO_BUTTON_LABEL = "Undo"

BACKGROUND_COLOR = (45, 45, 45)
GRID_LINE_COLOR = (0, 0, 0)
DEFAULT_CELL_COLOR = (255, 255, 255)
MARKED_COLOR = (102, 102, 102)            # #666666
VALID_QUEEN_COLOR = (150, 150, 150)       # grey queen
CONFLICTING_QUEEN_COLOR = (200, 40, 40)   # red queen
BUTTON_TEXT_COLOR = (255, 255, 255)

# Nine fixed 2x2 regions: (name, rgb, cells)
REGION_LAYOUT = (
    ("rose",       (255, 204, 204), ((0, 0), (0, 1), (1, 0), (1, 1))),  # #FFCCCC
    ("mint",       (204, 255, 204), ((0, 2), (0, 3), (1, 2), (1, 3))),  # #CCFFCC
    ("periwinkle", (204, 204, 255), ((0, 4), (0, 5), (1, 4), (1, 5))),  # #CCCCFF
    ("cream",      (255, 255, 204), ((2, 0), (2, 1), (3, 0), (3, 1))),  # #FFFFCC
    ("orchid",     (255, 204, 255), ((2, 2), (2, 3), (3, 2), (3, 3))),  # #FFCCFF
    ("aqua",       (204, 255, 255), ((2, 4), (2, 5), (3, 4), (3, 5))),  # #CCFFFF
    ("silver",     (217, 217, 217), ((4, 0), (4, 1), (5, 0), (5, 1))),  # #D9D9D9
    ("apricot",    (255, 230, 179), ((4, 2), (4, 3), (5, 2), (5, 3))),  # #FFE6B3
    ("sky",        (179, 230, 255), ((4, 4), (4, 5), (5, 4), (5, 5))),  # #B3E6FF
)
