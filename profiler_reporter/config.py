from pydantic_settings import BaseSettings

from profiler_reporter.schemas import ReporterArguments


class Settings(BaseSettings):
    model_config = {
        'extra': 'ignore',
        'env_file': '.env',
        'env_file_encoding': 'utf-8',
        'frozen': True,
    }

    REPORTER_BACKEND: str = 'influxdb'
    REPORTER_SERVER: str = 'localhost'
    REPORTER_PORT: int = 8086
    METRICS_PREFIX: str = 'statsd-jvm-profiler'
    # JSON object in the environment, e.g. {"username": "u", "database": "m"}
    REPORTER_ARGS: dict[str, str] = {}

    SERVICE_NAME: str = 'profiler-reporter'
    SERVICE_VERSION: str = '0.1.0'
    LOG_LEVEL: str = 'INFO'
    LOG_FORMAT: str = 'text'

    def to_arguments(self) -> ReporterArguments:
        return ReporterArguments(
            server=self.REPORTER_SERVER,
            port=self.REPORTER_PORT,
            metrics_prefix=self.METRICS_PREFIX,
            remaining_args=self.REPORTER_ARGS,
        )


settings = Settings()
