import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(debug: bool = False) -> None:
    """
    Console handler 설치 (CLI 진입점에서 한 번 호출)
    """
    global _handler

    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)

    level = logging.DEBUG if debug else logging.INFO
    root.setLevel(level)
    _handler.setLevel(level)

    # PyGithub / urllib3 request logs are noise at debug level
    logging.getLogger("github").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
