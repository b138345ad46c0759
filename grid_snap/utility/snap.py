from PySide6 import QtCore

from ..config import DEFAULT_CONFIG, SnapConfig
from ..constants import GridType, PreferSnapTo
from .isometric import snap_to_isometric_grid
from .logging import get_logger

logger = get_logger(__name__)


def snap_axis(value: int, phase: int, size: int, prefer: PreferSnapTo) -> int:

    '''
    Snap one coordinate onto the lattice phase + k*size, for integer k.

    I.e: with phase 0 and size 10, the value 7 goes to 10 for CLOSEST_GRID_VERTEX, 0 for FLOOR_GRID, and 10 for CEIL_GRID.
    A value already on the lattice stays put, except for BOX_END which always moves to the next vertex.
    '''

    # divmod floors, so r is always in [0, size) and q*size is the vertex at or below value, negatives included.
    q, r = divmod(value - phase, size)
    low = phase + q * size

    if prefer in (PreferSnapTo.BOX_ORIGIN, PreferSnapTo.FLOOR_GRID):
        return low

    if prefer == PreferSnapTo.CEIL_GRID:
        return low + size if r else value

    if prefer == PreferSnapTo.BOX_END:
        return low + size

    # Closest vertex. Exactly halfway goes to the lower vertex.
    return low + size if r > size // 2 else low


def snap_to_rectangular_grid(grid: QtCore.QRect, point: QtCore.QPoint, prefer: PreferSnapTo) -> QtCore.QPoint:

    if grid.isEmpty():
        return QtCore.QPoint(point)

    w = grid.width()
    h = grid.height()

    # Phase of the tiling, i.e: where the anchor falls inside a cell.
    phase_x = grid.x() % w
    phase_y = grid.y() % h

    return QtCore.QPoint(snap_axis(point.x(), phase_x, w, prefer),
                         snap_axis(point.y(), phase_y, h, prefer))


def snap_to_grid(grid: QtCore.QRect,
                 point: QtCore.QPoint,
                 prefer: PreferSnapTo,
                 grid_type: GridType = GridType.RECTANGULAR,
                 config: SnapConfig | None = None) -> QtCore.QPoint:

    '''
    Snap point to the grid whose cell is described by grid (anchor x/y, cell w/h).

    An empty grid (zero width or height) leaves the point as it is. Anything that isn't an isometric grid type is snapped rectangularly.
    Always returns a new QPoint.
    '''

    if grid.isEmpty():
        return QtCore.QPoint(point)

    if not isinstance(prefer, PreferSnapTo):
        # stored preferences come back as their string values
        try:
            prefer = PreferSnapTo(prefer)
        except ValueError:
            logger.debug("unknown snap preference %r, using closest grid vertex", prefer)
            prefer = PreferSnapTo.CLOSEST_GRID_VERTEX

    if grid_type == GridType.ISOMETRIC:
        return snap_to_isometric_grid(grid, point, prefer, config or DEFAULT_CONFIG)

    if grid_type != GridType.RECTANGULAR:
        logger.debug("unknown grid type %r, snapping rectangular", grid_type)

    return snap_to_rectangular_grid(grid, point, prefer)


def snap_point(grid: QtCore.QRect,
               point: QtCore.QPointF,
               prefer: PreferSnapTo,
               grid_type: GridType = GridType.RECTANGULAR,
               config: SnapConfig | None = None) -> QtCore.QPointF:

    '''
    Same as snap_to_grid, for scene positions. The point is rounded to whole units first (QPointF.toPoint).
    '''

    snapped = snap_to_grid(grid, point.toPoint(), prefer, grid_type, config)
    return QtCore.QPointF(snapped)


if __name__ == '__main__':

    print(snap_to_grid(QtCore.QRect(0, 0, 10, 10), QtCore.QPoint(7, 3), PreferSnapTo.CLOSEST_GRID_VERTEX))
