
import os
import logging
import tempfile


class DefaultConfig(object):
    DEBUG = False
    TESTING = False
    ROOT_DIRECTORY = os.path.expanduser('~/.chez')
    SQLALCHEMY_DATABASE_URI = 'sqlite:///{}'.format(os.path.join(
        ROOT_DIRECTORY, 'db.ordre.sqlite'))
    # inserts retried when a concurrent insert took the same order number
    ORDER_NUMBER_ATTEMPTS = 3
    LOG_SETUP = True
    LOG_LEVEL = logging.INFO


class DevelopmentConfig(DefaultConfig):
    DEBUG = True
    ROOT_DIRECTORY = '/tmp/chez'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///{}'.format(os.path.join(
        ROOT_DIRECTORY, 'db.ordre.sqlite'))
    LOG_LEVEL = logging.DEBUG


class TestingConfig(DefaultConfig):
    TESTING = True
    ROOT_DIRECTORY = tempfile.mkdtemp()
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    LOG_SETUP = False
