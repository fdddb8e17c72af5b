
import logging
import pytest
from chez.ordre.factory import create_app
from chez.ordre.logging_setup import setup_logging


def test_testing_config():
    app = create_app(config='chez.ordre.config.TestingConfig')
    assert app.config['TESTING']
    assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite://'
    assert 'api' in app.blueprints


def test_prefixed_env_overrides(monkeypatch):
    monkeypatch.setenv('ORDRE_ORDER_NUMBER_ATTEMPTS', '5')
    app = create_app(config='chez.ordre.config.TestingConfig')
    assert app.config['ORDER_NUMBER_ATTEMPTS'] == 5


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging(root_logger):
    setup_logging('debug')
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1

    handler = root_logger.handlers[0]
    own = logging.LogRecord('chez.ordre.store.sql', logging.DEBUG, __file__,
                            1, 'swap', None, None)
    other = logging.LogRecord('sqlalchemy.engine', logging.INFO, __file__,
                              1, 'select', None, None)
    noisy = logging.LogRecord('werkzeug', logging.WARNING, __file__,
                              1, 'restart', None, None)
    assert handler.filter(own)
    assert not handler.filter(other)
    assert handler.filter(noisy)
