import logging
import json
from pathlib import Path
import threading
from typing import Optional


ROOT_LOGGER_NAME = "itam"


class SingletonLogger:
    """
    Singleton that configures the "itam" logger hierarchy exactly once per process.

    Every module asks for a named child logger ("itam.routes", "itam.stores", ...);
    handlers only live on the root of the hierarchy so records are emitted once.
    """
    _instance = None
    _lock = threading.Lock()
    _configured = False

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(SingletonLogger, cls).__new__(cls)
        return cls._instance

    def configure(self, level: str = "INFO", log_dir: Optional[str] = "logs", force: bool = False) -> logging.Logger:
        """
        Attach console and (optionally) file handlers to the root "itam" logger.

        Args:
            level (str): Console level name (DEBUG, INFO, ...)
            log_dir (str): Directory for itam.log and errors.log. Falsy disables file output.
            force (bool): Reconfigure even if handlers were already attached

        Returns:
            logging.Logger: The configured root logger
        """
        with self._lock:
            if self._configured and not force:
                return logging.getLogger(ROOT_LOGGER_NAME)
            logger = self._create_logger(level, log_dir)
            self._configured = True
            return logger

    def get_logger(self, name: str = ROOT_LOGGER_NAME) -> logging.Logger:
        """
        Get a logger inside the "itam" hierarchy, configuring defaults on first use.

        Args:
            name (str): Dotted logger name, e.g. "itam.routes.assets"

        Returns:
            logging.Logger: Named logger
        """
        if not self._configured:
            self.configure()
        if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        return logging.getLogger(name)

    def _create_logger(self, level: str, log_dir: Optional[str]) -> logging.Logger:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        # Clear any existing handlers
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        formatter = JsonFormatter({
            "timestamp": "asctime",
            "level": "levelname",
            "logger": "name",
            "module": "module",
            "function": "funcName",
            "line": "lineno",
            "message": "message"
        })

        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_dir:
            logs_dir = Path(log_dir)
            logs_dir.mkdir(parents=True, exist_ok=True)

            # Fixed filenames, cleared on each run
            file_handler = logging.FileHandler(logs_dir / "itam.log", mode='w', encoding='utf-8')
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

            error_file_handler = logging.FileHandler(logs_dir / "errors.log", mode='w', encoding='utf-8')
            error_file_handler.setLevel(logging.ERROR)
            error_file_handler.setFormatter(formatter)
            logger.addHandler(error_file_handler)

        return logger


class JsonFormatter(logging.Formatter):
    """
    Formatter that outputs JSON strings after parsing the LogRecord.

    @param dict fmt_dict: Key: logging format attribute pairs. Defaults to {"message": "message"}.
    @param str time_format: time.strftime() format string. Default: "%Y-%m-%dT%H:%M:%S"
    @param str msec_format: Microsecond formatting. Appended at the end. Default: "%s.%03dZ"
    """
    def __init__(self, fmt_dict: dict = None, time_format: str = "%Y-%m-%dT%H:%M:%S", msec_format: str = "%s.%03dZ"):
        super().__init__()
        self.fmt_dict = fmt_dict if fmt_dict is not None else {"message": "message"}
        self.default_time_format = time_format
        self.default_msec_format = msec_format
        self.datefmt = None

    def usesTime(self) -> bool:
        return "asctime" in self.fmt_dict.values()

    def formatMessage(self, record) -> dict:
        """
        Return a dictionary of the relevant LogRecord attributes instead of a string.
        KeyError is raised if an unknown attribute is provided in the fmt_dict.
        """
        return {fmt_key: record.__dict__[fmt_val] for fmt_key, fmt_val in self.fmt_dict.items()}

    def format(self, record) -> str:
        record.message = record.getMessage()

        if self.usesTime():
            record.asctime = self.formatTime(record, self.datefmt)

        message_dict = self.formatMessage(record)

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)

        if record.exc_text:
            message_dict["exc_info"] = record.exc_text

        if record.stack_info:
            message_dict["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(message_dict, default=str)


def setup_logging(level: str = "INFO", log_dir: Optional[str] = "logs", force: bool = False) -> logging.Logger:
    """Configure the process-wide "itam" logger (idempotent unless force=True)."""
    return SingletonLogger().configure(level=level, log_dir=log_dir, force=force)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a named logger from the singleton-configured hierarchy.

    Args:
        name (str): Logger name; prefixed with "itam." when needed

    Returns:
        logging.Logger: Named logger
    """
    return SingletonLogger().get_logger(name)
