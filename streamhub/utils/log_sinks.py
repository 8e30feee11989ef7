# streamhub/utils/log_sinks.py
"""
Logging filters for streamhub.

The service initializer sets `service_id_context` while it works on a
backend, so every record emitted below it carries the backend id without the
id being passed down explicitly.
"""
import contextvars
import logging
from typing import Optional

service_id_context: contextvars.ContextVar[Optional[int]] = contextvars.ContextVar(
    "service_id", default=None
)


class ServiceIdFilter(logging.Filter):
    """
    A logging filter that injects the current service_id from the contextvar
    into the log record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Adds the service_id to the log record.

        :param record: The log record being processed.
        :type record: logging.LogRecord
        :return: Always returns True to allow the record to be processed.
        :rtype: bool
        """
        record.service_id = service_id_context.get()
        return True
