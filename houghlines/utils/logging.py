# loguru setup
from loguru import logger
import sys

_FMT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {message}"

def setup_logging(level="INFO"):
    # stderr so that --json-out - can own stdout
    logger.remove()
    logger.add(sys.stderr, level=str(level).upper(), format=_FMT, backtrace=False, diagnose=False)
    return logger
