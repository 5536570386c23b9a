"""
Logger utility.

Module loggers are children of the package logger, which carries the one
stream handler; its level follows the active configuration.
"""
import logging

from .config import get_config

PACKAGE = "vectors3d"
FORMAT = "[%(asctime)s] vectors3d %(levelname)s %(module)s:%(lineno)d: %(message)s"


def get_logger(name=PACKAGE):
    """Retrieve a logger under the package logger, configuring the latter once."""
    root = logging.getLogger(PACKAGE)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(FORMAT))
        root.addHandler(handler)
    root.setLevel(get_config()["log_level"])
    if name != PACKAGE and not name.startswith(PACKAGE + "."):
        name = f"{PACKAGE}.{name}"
    return logging.getLogger(name)
