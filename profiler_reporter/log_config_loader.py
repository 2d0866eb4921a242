"""Logging setup for reporter processes.

Reporters log with ``extra`` fields (``url``, ``database``, ``points``...).
The formatters render those fields either as one JSON object per line or as
``[key=value]`` suffixes, and mask any field named in ``secret_fields`` of
``log_config.json`` so credentials never reach the log stream.
"""

import logging
from pathlib import Path
import sys
from typing import Any

import orjson

CONFIG_PATH = Path(__file__).parent / 'log_config.json'
NOISY_LOGGERS = ('urllib3', 'influxdb_client', 'reactivex')


def load_log_config(path: Path = CONFIG_PATH) -> dict[str, Any]:
    try:
        data = orjson.loads(path.read_bytes())
    except FileNotFoundError as e:
        raise RuntimeError(f'Log config file not found: {path}') from e
    except orjson.JSONDecodeError as e:
        raise RuntimeError(f'Invalid JSON in log config file {path}: {e}') from e
    if not isinstance(data, dict):
        raise RuntimeError(f'Expected JSON object in {path}, got {type(data).__name__}')
    for key in ('standard_fields', 'secret_fields'):
        data[key] = frozenset(data.get(key, ()))
    return data


LOG_CONFIG: dict[str, Any] = load_log_config()


class ReporterFormatter(logging.Formatter):
    def __init__(self, service_name: str, version: str) -> None:
        super().__init__(datefmt=LOG_CONFIG['datefmt'])
        self.service_name = service_name
        self.version = version
        self.standard_fields: frozenset[str] = LOG_CONFIG['standard_fields']
        self.secret_fields: frozenset[str] = LOG_CONFIG['secret_fields']
        self.secret_mask: str = LOG_CONFIG['secret_mask']

    def extra_fields(self, record: logging.LogRecord) -> dict[str, Any]:
        return {
            key: self.secret_mask if key.lower() in self.secret_fields else value
            for key, value in record.__dict__.items()
            if key not in self.standard_fields and not key.startswith('_')
        }


class JsonFormatter(ReporterFormatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'service': self.service_name,
            'version': self.version,
            'logger': record.name,
            'message': record.getMessage(),
            **self.extra_fields(record),
        }
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return orjson.dumps(entry, default=str).decode('utf-8')


class TextFormatter(ReporterFormatter):
    def format(self, record: logging.LogRecord) -> str:
        fields = ''.join(f' [{k}={v}]' for k, v in self.extra_fields(record).items())
        line = (
            f'{self.formatTime(record, self.datefmt)} [{record.levelname:<8}] '
            f'{record.name}: {record.getMessage()}{fields}'
        )
        if record.exc_info:
            line += f'\n{self.formatException(record.exc_info)}'
        return line


FORMATTERS: dict[str, type[ReporterFormatter]] = {
    'json': JsonFormatter,
    'text': TextFormatter,
}


def setup_logging(
    service_name: str,
    level: str,
    log_format: str,
    version: str,
) -> logging.Handler:
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter_cls = FORMATTERS.get(log_format.lower(), TextFormatter)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter_cls(service_name=service_name, version=version))
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
    return handler
