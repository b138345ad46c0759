# Helpers shared across the package. Snapping itself lives in .snap and .isometric

from .logging import get_logger, setup_logging
from .rounding import round_half_up
