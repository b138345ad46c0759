'''
Package logging helpers. Thin layer over the standard library logging module.
'''

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def setup_logging(level_name: str | None = None) -> None:
    '''
    Attach a console handler to the root logger, unless the host application already configured one.
    '''

    root = logging.getLogger()
    if root.handlers:
        return

    if level_name is None:
        # deferred, config imports this module
        from ..config import resolve_log_level_name
        level_name = resolve_log_level_name()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name.upper(), logging.INFO))
