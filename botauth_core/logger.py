import logging, json, sys, time, os
from botauth_core.constants import ENV_LOG_LEVEL, ENV_LOG_FILE, DEFAULT_LOG_LEVEL, LOGGER_ROOT


def get_logger(name=LOGGER_ROOT, level=None, to_file=None):
    """
    Structured JSON-line logger for botauth components.

    ``level`` and ``to_file`` fall back to BOTAUTH_LOG_LEVEL and
    BOTAUTH_LOG_FILE when not given. Handlers are attached once per name.
    """
    logger = logging.getLogger(name)
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(level), int):
            level = DEFAULT_LOG_LEVEL
    logger.setLevel(level)

    if to_file is None:
        to_file = os.getenv(ENV_LOG_FILE) or None

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # UTC timestamps
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
