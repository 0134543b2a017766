"""Tests for logger setup, formatting and filters."""
import json
import logging
from types import SimpleNamespace

from humm.logging import JSONFormatter, LoggerConfig, RequestContextFilter, SensitiveDataFilter, getLogger
from humm.support import Config
from humm.support.facades import Facade


def make_record(msg='message', args=(), **extra):
    record = logging.LogRecord('application', logging.INFO, __file__, 10, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_get_logger_keeps_module_and_channel_names():
    assert getLogger('humm.view.resolver').name == 'humm.view.resolver'
    assert getLogger('application').name == 'application'
    assert getLogger('random') is logging.getLogger()


def test_json_formatter_includes_extra_fields():
    record = make_record('Dispatching %s', ('Home',), site_view='HomeView')

    entry = json.loads(JSONFormatter().format(record))

    assert entry['message'] == 'Dispatching Home'
    assert entry['level'] == 'INFO'
    assert entry['site_view'] == 'HomeView'
    assert 'args' not in entry


def test_sensitive_data_is_redacted():
    record = make_record('GET %s', ('/login?user=bob&token=abc123',))

    SensitiveDataFilter().filter(record)

    assert record.getMessage() == 'GET /login?user=bob&token=[REDACTED]'


def test_request_context_filter():
    Facade.set_current_request(SimpleNamespace(path='/about', host='Example.com:8000'))
    record = make_record()

    RequestContextFilter().filter(record)

    assert record.request_path == '/about'
    assert record.request_host == 'example.com'


def test_request_context_filter_outside_request():
    record = make_record()

    RequestContextFilter().filter(record)

    assert record.request_path is None
    assert record.request_host is None


def test_setup_logger_writes_json_file(base_path):
    Config.set('app.APP_ENV', 'development')

    logger = LoggerConfig.setup_logger('application')
    logger.debug('Resolved %s', 'About')
    for handler in logger.handlers:
        handler.flush()

    lines = (base_path / 'storage' / 'logs' / 'application.log').read_text().splitlines()
    entry = json.loads(lines[-1])
    assert entry['message'] == 'Resolved About'
    assert entry['request_path'] is None
    assert not logger.propagate


def test_level_by_environment():
    assert LoggerConfig.get_level_by_environment('production') == logging.WARNING
    assert LoggerConfig.get_level_by_environment('Development') == logging.DEBUG
    assert LoggerConfig.get_level_by_environment('unknown') == logging.INFO
