from enum import Enum

class PreferSnapTo(Enum):
    '''
    Which grid vertex a point should be pulled towards.

    Values are the strings an editor stores in its preferences, so PreferSnapTo("floor_grid") works.
    '''

    CLOSEST_GRID_VERTEX = 'closest_grid_vertex'
    BOX_ORIGIN = 'box_origin'       # top-left corner of a selection box
    BOX_END = 'box_end'             # bottom-right corner, always the next vertex out
    FLOOR_GRID = 'floor_grid'
    CEIL_GRID = 'ceil_grid'
