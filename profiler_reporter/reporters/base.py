from abc import ABC, abstractmethod
from collections.abc import Mapping
import logging
from types import TracebackType
from typing import Generic, TypeVar

from profiler_reporter.schemas import GaugeValue, ReporterArguments

ClientT = TypeVar('ClientT')


class Reporter(ABC, Generic[ClientT]):
    """Lifecycle shared by every backend reporter.

    Construction runs ``handle_arguments`` and then ``create_client``; a
    reporter whose arguments fail validation never acquires a client.
    """

    def __init__(
        self, arguments: ReporterArguments, logger: logging.Logger | None = None
    ) -> None:
        self.logger = logger or logging.getLogger(type(self).__module__)
        self.arguments = arguments
        self.handle_arguments(arguments)
        self.client: ClientT = self.create_client(
            arguments.server, arguments.port, arguments.metrics_prefix
        )

    def record_gauge_value(self, key: str, value: GaugeValue) -> None:
        self.record_gauge_values({key: value})

    @abstractmethod
    def record_gauge_values(self, gauges: Mapping[str, GaugeValue]) -> None:
        """Send every gauge in one backend write."""

    @abstractmethod
    def emit_bounds(self) -> bool:
        """Whether the profiler should also report min/max bound metrics."""

    @abstractmethod
    def create_client(self, server: str, port: int, prefix: str) -> ClientT:
        pass

    @abstractmethod
    def handle_arguments(self, arguments: ReporterArguments) -> None:
        """Read backend-specific arguments, raising ConfigurationError if invalid."""

    def close(self) -> None:
        pass

    def log_info(self, message: str, **extra: object) -> None:
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(message, extra=extra)

    def __enter__(self) -> 'Reporter[ClientT]':
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
