import logging
import sys

from classroom.settings import settings


logging_formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s")

logging_handler = logging.StreamHandler(sys.stdout)
logging_handler.setFormatter(logging_formatter)

# every module logger is a child of the package logger, which owns the only handler
package_logger = logging.getLogger("classroom")
package_logger.addHandler(logging_handler)
package_logger.setLevel(settings.log_level)
package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    return package_logger.getChild(name.removeprefix("classroom."))
