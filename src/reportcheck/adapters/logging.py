"""Python logging handler adapter for reportcheck.

This adapter bridges Python's standard library logging module to an
ErrorReporterPort, so exceptions logged with ``logger.exception(...)``
are reported like any other error and can be asserted with
have_reported_error.
"""

import logging

from reportcheck.core.ports import ErrorReporterPort

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["logger", "level", "message"]


class ErrorReportingHandler(logging.Handler):
    """Logging handler that reports logged exceptions to an ErrorReporterPort.

    Records without exception info are ignored.

    Example:
        ```python
        from reportcheck import ErrorReportingHandler, get_reporter

        logging.getLogger().addHandler(ErrorReportingHandler(get_reporter()))

        try:
            charge(order)
        except PaymentError:
            logger.exception("charge failed", extra={"order_id": order.id})
        ```
    """

    def __init__(
        self,
        reporter: ErrorReporterPort,
        include_attrs: list[str] | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with an error reporter.

        Args:
            reporter: Adapter implementing ErrorReporterPort.
            include_attrs: Record attributes to attach to each report. Any of
                "logger", "level", "message", "module", "funcName", "lineno",
                "pathname". Defaults to ["logger", "level", "message"].
            level: Minimum record level handled.
        """
        super().__init__(level)
        self._reporter = reporter
        self._include_attrs = (
            include_attrs if include_attrs is not None else _DEFAULT_INCLUDE_ATTRS
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Report the exception attached to a log record.

        Args:
            record: The log record to emit.
        """
        if not record.exc_info or record.exc_info[1] is None:
            return

        attr_mapping: dict[str, object] = {
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }
        attributes: dict[str, object] = {
            key: attr_mapping[key] for key in self._include_attrs if key in attr_mapping
        }

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                attributes[key] = value

        self._reporter.report(record.exc_info[1], **attributes)
