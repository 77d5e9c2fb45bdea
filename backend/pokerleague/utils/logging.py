import logging

from pokerleague.config import config


def create_logger(level: int) -> logging.Logger:
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    formatter = logging.Formatter(log_format)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    _logger = logging.getLogger("pokerleague")
    _logger.setLevel(level)
    _logger.addHandler(stream_handler)
    _logger.propagate = False
    return _logger


logger = create_logger(logging.getLevelName(config.log_level.upper()))
