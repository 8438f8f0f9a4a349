from logging import Formatter as LoggingFormatter
from logging import LogRecord
from logging import StreamHandler as StreamLoggingHandler
from logging import getLogger

from .cli import app, run


class LoggingFilter:
    def filter(self, record: LogRecord) -> bool:
        return record.name.startswith("PPpackage")


logging_formatter = LoggingFormatter("%(name)s: %(message)s")
logging_handler = StreamLoggingHandler()
logging_handler.setLevel("INFO")
logging_handler.addFilter(LoggingFilter())
logging_handler.setFormatter(logging_formatter)
logger = getLogger()
logger.setLevel("INFO")
logger.addHandler(logging_handler)

run(app, "PPpackage-versions")
