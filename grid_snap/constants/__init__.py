from .grid_type import GridType
from .snap_preference import PreferSnapTo
