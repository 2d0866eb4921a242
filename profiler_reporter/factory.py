import logging

from profiler_reporter import config
from profiler_reporter.config import Settings
from profiler_reporter.log_config_loader import setup_logging
from profiler_reporter.reporters.base import Reporter
from profiler_reporter.reporters.registry import ReporterRegistry, default_registry

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or config.settings
    setup_logging(
        service_name=settings.SERVICE_NAME,
        level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
        version=settings.SERVICE_VERSION,
    )


def create_reporter(
    settings: Settings | None = None,
    registry: ReporterRegistry = default_registry,
    reporter_logger: logging.Logger | None = None,
) -> Reporter:
    settings = settings or config.settings
    reporter_cls = registry.get(settings.REPORTER_BACKEND)
    logger.info(
        'Creating reporter',
        extra={
            'backend': settings.REPORTER_BACKEND,
            'server': settings.REPORTER_SERVER,
            'port': settings.REPORTER_PORT,
            'prefix': settings.METRICS_PREFIX,
        },
    )
    return reporter_cls(settings.to_arguments(), logger=reporter_logger)
