
import logging
import sys


class _ThirdPartyFilter(logging.Filter):
    """Let chez.ordre through, other loggers only from WARNING up"""

    def filter(self, record):
        if record.name.startswith('chez.ordre'):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level=logging.INFO):
    """
    Configure the root logger with a single stderr handler

    Call once, before the first log record is emitted.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'))
    handler.addFilter(_ThirdPartyFilter())
    root.addHandler(handler)

    logging.captureWarnings(True)
