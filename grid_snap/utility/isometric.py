'''
Isometric (diamond) grid snapping.

Tiles are diamonds tileW wide and tileH tall, tile (0, 0) has its top vertex on the grid anchor. Going from tile to screen:

    screen.x = origin.x + (tile.x - tile.y) * halfW
    screen.y = origin.y + (tile.x + tile.y) * halfH

and back:

    tile.x = (rel.x / halfW + rel.y / halfH) / 2
    tile.y = (rel.y / halfH - rel.x / halfW) / 2

A 2:1 cell (e.g. 32x16) is the usual isometric look, other ratios give dimetric grids.
See Clint Bellanger's "Isometric Tiles Math": https://clintbellanger.net/articles/isometric_math/
'''

import math

from PySide6 import QtCore

from ..config import SnapConfig
from ..constants import PreferSnapTo
from .rounding import round_half_up


def tile_to_screen(tile_x: int, tile_y: int, origin_x: float, origin_y: float, half_w: float, half_h: float) -> tuple[float, float]:
    return (origin_x + (tile_x - tile_y) * half_w,
            origin_y + (tile_x + tile_y) * half_h)


def screen_to_tile(rel_x: float, rel_y: float, half_w: float, half_h: float) -> tuple[float, float]:
    '''
    Fractional tile coordinates of a point given relative to the grid origin.
    '''

    return ((rel_x / half_w + rel_y / half_h) / 2.0,
            (rel_y / half_h - rel_x / half_w) / 2.0)


def _distance(a: QtCore.QPoint, b: QtCore.QPoint) -> float:
    return math.hypot(a.x() - b.x(), a.y() - b.y())


def _nearest_vertical_vertex(rel_x: float, rel_y: float, origin_x: float, origin_y: float, half_w: float, half_h: float) -> QtCore.QPoint:
    # Vertical lines sit at origin.x + k*halfW, vertices along them every halfH.
    vertical_x = origin_x + round_half_up(rel_x / half_w) * half_w
    vertical_y = origin_y + round_half_up(rel_y / half_h) * half_h
    return QtCore.QPoint(round_half_up(vertical_x), round_half_up(vertical_y))


def snap_to_isometric_grid(grid: QtCore.QRect,
                           point: QtCore.QPoint,
                           prefer: PreferSnapTo,
                           config: SnapConfig) -> QtCore.QPoint:

    if grid.isEmpty():
        return QtCore.QPoint(point)

    half_w = grid.width() / 2.0
    half_h = grid.height() / 2.0

    origin_x = float(grid.x())
    origin_y = float(grid.y())

    rel_x = point.x() - origin_x
    rel_y = point.y() - origin_y
    tile_xf, tile_yf = screen_to_tile(rel_x, rel_y, half_w, half_h)

    # Odd cell sizes put vertices on half pixels. Once rounded to a pixel, such a vertex maps back to within
    # this much of its tile coordinates, so floor/ceil must not step past it.
    slack = (0.5 / half_w + 0.5 / half_h) / 2.0

    # Both tile coordinates move together, a pair of them is one diamond vertex.
    if prefer in (PreferSnapTo.BOX_ORIGIN, PreferSnapTo.FLOOR_GRID):
        tile_x, tile_y = math.floor(tile_xf + slack), math.floor(tile_yf + slack)
    elif prefer in (PreferSnapTo.BOX_END, PreferSnapTo.CEIL_GRID):
        tile_x, tile_y = math.ceil(tile_xf - slack), math.ceil(tile_yf - slack)
    else:
        tile_x, tile_y = round_half_up(tile_xf), round_half_up(tile_yf)

    snap_x, snap_y = tile_to_screen(tile_x, tile_y, origin_x, origin_y, half_w, half_h)
    best = QtCore.QPoint(round_half_up(snap_x), round_half_up(snap_y))

    if config.snap_to_verticals and prefer == PreferSnapTo.CLOSEST_GRID_VERTEX:
        candidate = _nearest_vertical_vertex(rel_x, rel_y, origin_x, origin_y, half_w, half_h)
        if _distance(candidate, point) < _distance(best, point):
            best = candidate

    return best
