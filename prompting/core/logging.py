import logging

_LOGGERS: set[str] = set()


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    _LOGGERS.add(name)
    return logger


def set_level(level: str | int) -> None:
    for name in _LOGGERS:
        logging.getLogger(name).setLevel(level)


"""
Logging setup and it configures:
- Log format
- Log level
- Output destination

The main purpose:
Standardized application logging.
"""
