from structlog.types import FilteringBoundLogger


class RepogenError(Exception):
    """Base exception for all repogen errors.

    Each exception can define a log_category for consistent logging.
    """

    log_category: str = 'repogen_error'

    @classmethod
    def get_log_category(cls) -> str:
        """Get the log category for this exception type."""
        return cls.log_category


def log_exception(logger: FilteringBoundLogger, exc: Exception) -> None:
    """Log an exception with the appropriate category.

    A RepogenError is an expected failure and is logged without a traceback
    under its log_category. Anything else is logged with the traceback using
    a category derived from the exception type.

    Args:
        logger: The logger instance to use (from hotlog.get_logger)
        exc: The exception to log
    """
    if isinstance(exc, RepogenError):
        logger.error(exc.get_log_category(), error=str(exc))
        return
    logger.exception(f'{exc.__class__.__name__.lower()}', error=str(exc))
