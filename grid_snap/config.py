'''
Snapping configuration, optionally sourced from the environment.
'''

import os
from dataclasses import dataclass

from .utility.logging import get_logger

logger = get_logger(__name__)


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class SnapConfig:
    '''
    Immutable knobs for snap_to_grid.

    snap_to_verticals lets the isometric snapper also consider vertices sitting on the nearest vertical grid line.
    Off unless asked for.
    '''

    snap_to_verticals: bool = False


DEFAULT_CONFIG = SnapConfig()


def resolve_log_level_name(default: str = "INFO") -> str:
    value = os.getenv("GRID_SNAP_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_snap_config() -> SnapConfig:
    '''
    Build a SnapConfig from GRID_SNAP_* env vars. Unset vars keep their defaults, unrecognised flag values count as off.
    '''

    config = SnapConfig(
        snap_to_verticals=_flag("GRID_SNAP_ISO_VERTICALS", DEFAULT_CONFIG.snap_to_verticals),
    )
    logger.debug("loaded snap config: %s", config)
    return config
