# Public surface: snap a point to a rectangular or isometric grid.

from .config import SnapConfig, load_snap_config
from .constants import GridType, PreferSnapTo
from .utility.snap import snap_point, snap_to_grid
