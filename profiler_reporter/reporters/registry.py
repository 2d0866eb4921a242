from collections import OrderedDict
from collections.abc import Iterable

from profiler_reporter.reporters.base import Reporter
from profiler_reporter.reporters.influxdb import InfluxDBReporter

ReporterClass = type[Reporter]


class ReporterRegistry:
    """Maps backend names to reporter classes."""

    def __init__(self) -> None:
        self._reporters: 'OrderedDict[str, ReporterClass]' = OrderedDict()

    def register(self, name: str, reporter_cls: ReporterClass) -> None:
        if name in self._reporters:
            raise ValueError(f"Reporter '{name}' is already registered.")
        self._reporters[name] = reporter_cls

    def names(self) -> Iterable[str]:
        return self._reporters.keys()

    def get(self, name: str) -> ReporterClass:
        if name not in self._reporters:
            raise KeyError(f"Reporter '{name}' is not registered.")
        return self._reporters[name]


default_registry = ReporterRegistry()
default_registry.register('influxdb', InfluxDBReporter)
