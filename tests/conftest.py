"""Shared fixtures for reporter tests."""

from collections.abc import Callable, Iterator
import logging
from unittest.mock import MagicMock, patch

import pytest

from profiler_reporter.reporters import influxdb
from profiler_reporter.schemas import ReporterArguments

FROZEN_TIME = 1_700_000_000.123


@pytest.fixture
def influx_client_cls() -> Iterator[MagicMock]:
    """Replace the InfluxDB client class so no network connection is made."""
    with patch('profiler_reporter.reporters.influxdb.InfluxDBClient') as client_cls:
        yield client_cls


@pytest.fixture
def write_api(influx_client_cls: MagicMock) -> MagicMock:
    return influx_client_cls.return_value.write_api.return_value


@pytest.fixture
def frozen_time(monkeypatch: pytest.MonkeyPatch) -> int:
    monkeypatch.setattr(influxdb.time, 'time', lambda: FROZEN_TIME)
    return int(FROZEN_TIME * 1000)


@pytest.fixture
def make_arguments() -> Callable[..., ReporterArguments]:
    def _make(
        prefix: str = 'app.host',
        server: str = 'influx.local',
        port: int = 8086,
        **remaining: str,
    ) -> ReporterArguments:
        return ReporterArguments(
            server=server,
            port=port,
            metrics_prefix=prefix,
            remaining_args=remaining,
        )

    return _make


@pytest.fixture
def credentials() -> dict[str, str]:
    return {'username': 'u', 'password': 's3cr3t-pw', 'database': 'metrics'}


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
