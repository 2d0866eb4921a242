from collections.abc import Mapping
import logging
import time

from influxdb_client import InfluxDBClient, WritePrecision
from influxdb_client.client.write_api import SYNCHRONOUS

from profiler_reporter.errors import ConfigurationError
from profiler_reporter.points import build_batch
from profiler_reporter.reporters.base import Reporter
from profiler_reporter.schemas import GaugeValue, ReporterArguments
from profiler_reporter.tags import get_tags

USERNAME_ARG = 'username'
PASSWORD_ARG = 'password'
DATABASE_ARG = 'database'
TAG_MAPPING_ARG = 'tagMapping'
USE_HTTPS_ARG = 'useHttps'

REQUIRED_ARGS = (USERNAME_ARG, PASSWORD_ARG, DATABASE_ARG)

# InfluxDB 1.x accepts any organization through the 2.x compatibility API.
V1_COMPAT_ORG = '-'


def parse_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() == 'true'


def validate_required_arguments(
    remaining_args: Mapping[str, str], required: tuple[str, ...] = REQUIRED_ARGS
) -> None:
    missing = [name for name in required if remaining_args.get(name) is None]
    if missing:
        raise ConfigurationError('Missing required reporter arguments', missing)


class InfluxDBReporter(Reporter[InfluxDBClient]):
    """Reporter that writes gauges to InfluxDB.

    InfluxDB computes ranges in its query language, so the profiler's
    min/max bound metrics are not emitted.
    """

    username: str
    password: str
    database: str
    tag_mapping: str | None
    use_https: bool
    tags: dict[str, str]

    def __init__(
        self, arguments: ReporterArguments, logger: logging.Logger | None = None
    ) -> None:
        super().__init__(arguments, logger)
        self._write_api = self.client.write_api(write_options=SYNCHRONOUS)

    def handle_arguments(self, arguments: ReporterArguments) -> None:
        args = arguments.remaining_args
        self.tag_mapping = args.get(TAG_MAPPING_ARG)
        self.use_https = parse_bool(args.get(USE_HTTPS_ARG))

        self.log_info(
            'Received reporter arguments',
            username=args.get(USERNAME_ARG),
            password='XXXXX',
            database=args.get(DATABASE_ARG),
            tag_mapping=self.tag_mapping,
            use_https=self.use_https,
        )

        validate_required_arguments(args)
        self.username = args[USERNAME_ARG]
        self.password = args[PASSWORD_ARG]
        self.database = args[DATABASE_ARG]

        self.tags = get_tags(self.tag_mapping, arguments.metrics_prefix, mangle=True)

    def resolve_url(self, server: str, port: int) -> str:
        scheme = 'https' if self.use_https else 'http'
        return f'{scheme}://{server}:{port}'

    def create_client(self, server: str, port: int, prefix: str) -> InfluxDBClient:
        url = self.resolve_url(server, port)
        self.log_info('Connecting to InfluxDB', url=url, database=self.database)
        return InfluxDBClient(
            url=url,
            token=f'{self.username}:{self.password}',
            org=V1_COMPAT_ORG,
        )

    def record_gauge_values(self, gauges: Mapping[str, GaugeValue]) -> None:
        time_ms = int(time.time() * 1000)
        batch = build_batch(time_ms, gauges, self.tags)
        if not batch:
            self.logger.debug('No gauges to report')
            return
        try:
            self._write_api.write(
                bucket=self.database,
                record=[point.to_point() for point in batch],
                write_precision=WritePrecision.MS,
            )
        except Exception:
            self.logger.exception(
                'Failed to write points to InfluxDB',
                extra={'database': self.database, 'points': len(batch)},
            )
            raise
        self.logger.debug(
            'Points written to InfluxDB',
            extra={'database': self.database, 'points': len(batch)},
        )

    def emit_bounds(self) -> bool:
        return False

    def close(self) -> None:
        self.log_info('Closing InfluxDB client', database=self.database)
        self.client.close()
