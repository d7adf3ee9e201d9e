"""One-shot notifications fired when a submit attempt resolves."""

from abc import ABC, abstractmethod

from booking_form.utils.logging_config import get_logger

logger = get_logger(__name__)


class Notifier(ABC):
    """Receives exactly one notification per resolved submit attempt."""

    @abstractmethod
    def notify_success(self, message: str) -> None:
        ...

    @abstractmethod
    def notify_failure(self, message: str) -> None:
        ...


class LoggingNotifier(Notifier):
    """Default notifier when no presentation layer is attached."""

    def notify_success(self, message: str) -> None:
        logger.info(message, extra={"notification": "success"})

    def notify_failure(self, message: str) -> None:
        logger.warning(message, extra={"notification": "failure"})
