# streamhub/utils/logger.py
"""
Centralized logging setup for streamhub.

Configures the root logger once with a JSON formatter on stdout and returns
named child loggers wrapped in a structured adapter.
"""
import logging
import sys
from typing import Any, MutableMapping

from pythonjsonlogger.json import JsonFormatter

from streamhub.utils.config import get_config
from streamhub.utils.log_sinks import ServiceIdFilter

_LOGGING_CONFIGURED = False


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Extends the standard logging adapter to support structured logging.

    A dictionary passed via `extra` is nested under `extra_data` so it cannot
    collide with the standard LogRecord attributes.
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        """Processes the log message and keyword arguments.

        :param msg: The original log message.
        :type msg: str
        :param kwargs: The keyword arguments passed to the log call.
        :type kwargs: MutableMapping[str, Any]
        :return: The processed message and keyword arguments.
        :rtype: tuple[str, MutableMapping[str, Any]]
        """
        original_extra_content = kwargs.get("extra")
        if original_extra_content is not None:
            kwargs["extra"] = {"extra_data": original_extra_content}
        return msg, kwargs


def setup_logger(name: str) -> StructuredLoggerAdapter:
    """Sets up the root logger and returns a structured child logger.

    On the first call the root logger is configured from `logging.level` in
    the streamhub config. Subsequent calls only fetch the named logger.

    :param name: The name of the logger, typically `__name__`.
    :type name: str
    :return: A `StructuredLoggerAdapter` instance ready for use.
    :rtype: StructuredLoggerAdapter
    """
    global _LOGGING_CONFIGURED

    if not _LOGGING_CONFIGURED:
        root_logger = logging.getLogger()

        log_level_str = str(
            get_config().get("logging", {}).get("level", "info")
        ).upper()
        level = getattr(logging, log_level_str, logging.INFO)
        root_logger.setLevel(level)

        if root_logger.hasHandlers():
            root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(service_id)s %(message)s"
        )
        console_handler.setFormatter(formatter)
        console_handler.addFilter(ServiceIdFilter())
        root_logger.addHandler(console_handler)

        root_logger.debug(
            "Root logger configured with JSON stdout handler. Level: %s",
            log_level_str,
        )
        _LOGGING_CONFIGURED = True

    logger_instance = logging.getLogger(name)
    return StructuredLoggerAdapter(logger_instance, {})
