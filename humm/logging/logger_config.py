"""
Logging Configuration
Rotating log files with request context and redaction of secrets
"""
import json
import logging
import logging.handlers
import re
from datetime import datetime
from typing import Dict, Iterable, Optional


class RequestContextFilter(logging.Filter):
    """
    Adds the path and host of the request being served to every record
    (both None outside a request)
    """

    def filter(self, record: logging.LogRecord) -> bool:
        from humm.support.facades import HttpRequest

        request = HttpRequest.request()
        if not hasattr(record, 'request_path'):
            record.request_path = getattr(request, 'path', None)
        if not hasattr(record, 'request_host'):
            record.request_host = HttpRequest.host()
        return True


class SensitiveDataFilter(logging.Filter):
    """
    Redacts secrets passed in query strings and headers

    Request paths end up in log lines, and a query string can carry
    credentials: '/login?token=abc' is logged as '/login?token=[REDACTED]'.
    """

    DEFAULT_KEYS = ('password', 'token', 'api_key', 'secret')

    def __init__(self, keys: Optional[Iterable[str]] = None):
        super().__init__()
        names = '|'.join(re.escape(key) for key in (keys or self.DEFAULT_KEYS))
        self.query_pattern = re.compile(rf'((?:{names})=)[^&\s"]*', re.IGNORECASE)
        self.header_pattern = re.compile(r'(Authorization:\s+\w+\s+)\S+', re.IGNORECASE)

    def redact(self, value):
        if not isinstance(value, str):
            return value
        value = self.query_pattern.sub(r'\1[REDACTED]', value)
        return self.header_pattern.sub(r'\1[REDACTED]', value)

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self.redact(record.msg)
        if isinstance(record.args, dict):
            record.args = {key: self.redact(value) for key, value in record.args.items()}
        elif isinstance(record.args, tuple):
            record.args = tuple(self.redact(arg) for arg in record.args)

        if hasattr(record, 'request_path'):
            record.request_path = self.redact(record.request_path)
        return True


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line

    Attributes passed with extra={...} are added next to the standard fields.
    """

    # Attributes every LogRecord carries
    STANDARD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f'{record.module}:{record.funcName}:{record.lineno}',
        }

        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS and key not in entry:
                entry[key] = value

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class LoggerConfig:
    """
    Builds the loggers declared in app.ALLOWED_LOGGING_HANDLERS
    """

    TEXT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s (%(request_host)s %(request_path)s): %(message)s'

    LEVELS: Dict[str, int] = {
        'production': logging.WARNING,
        'staging': logging.INFO,
        'development': logging.DEBUG,
        'local': logging.DEBUG,
        'testing': logging.ERROR,
    }

    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = 'json',
        filter_sensitive: bool = True,
        file_name: Optional[str] = None,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None,
    ) -> logging.Logger:
        """
        Send a logger to storage/logs/<file_name>.log (and to the console in debug)

        Example:
            LoggerConfig.setup_logger('application', format_type='text')
        """
        from humm.defaults import DEFAULT_APP_ENV, DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_MAX_BYTES
        from humm.support import Config, Storage

        log_file = Storage.ensure_directory(Storage.logs()) / f'{file_name or name}.log'

        formatter = JSONFormatter() if format_type == 'json' else logging.Formatter(LoggerConfig.TEXT_FORMAT)
        filters = [RequestContextFilter()]
        if filter_sensitive:
            filters.append(SensitiveDataFilter())

        handlers = [logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes or DEFAULT_LOG_MAX_BYTES,
            backupCount=backup_count or DEFAULT_LOG_BACKUP_COUNT,
            encoding='utf-8',
        )]
        if Config.get('app.APP_DEBUG', False):
            handlers.append(logging.StreamHandler())

        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        for handler in handlers:
            handler.setFormatter(formatter)
            for log_filter in filters:
                handler.addFilter(log_filter)
            logger.addHandler(handler)

        logger.setLevel(LoggerConfig.get_level_by_environment(Config.get('app.APP_ENV', DEFAULT_APP_ENV)))
        # Records stop here, the root logger would print them twice
        logger.propagate = False
        return logger

    @classmethod
    def get_level_by_environment(cls, environment: str) -> int:
        """Logging level of an environment name, INFO when unknown"""
        return cls.LEVELS.get(str(environment).lower(), logging.INFO)
