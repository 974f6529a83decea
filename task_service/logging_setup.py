import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging with a single stderr handler.

    Safe to call more than once; existing handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)
    root.addHandler(handler)

    for noisy in ("httpx", "multipart"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
