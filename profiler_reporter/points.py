from collections.abc import Mapping

from profiler_reporter.schemas import GaugeValue, MeasurementPoint


def build_point(
    time_ms: int, key: str, value: GaugeValue, tags: Mapping[str, str]
) -> MeasurementPoint:
    return MeasurementPoint(name=key, time_ms=time_ms, value=value, tags=dict(tags))


def build_batch(
    time_ms: int, gauges: Mapping[str, GaugeValue], tags: Mapping[str, str]
) -> list[MeasurementPoint]:
    return [build_point(time_ms, key, value, tags) for key, value in gauges.items()]
