from collections.abc import Iterable


class ReporterError(Exception):
    pass


class ConfigurationError(ReporterError, ValueError):
    def __init__(self, message: str, missing: Iterable[str] = ()):
        self.missing = tuple(missing)
        if self.missing:
            message = f'{message}: {", ".join(self.missing)}'
        super().__init__(message)
