
import os
import logging
from flask import Flask
from .api import api
from .logging_setup import setup_logging
from .models import db

logger = logging.getLogger(__name__)


def create_app(name='chez.ordre', config=None):
    """
    Flask App factory

    Settings come from `DefaultConfig`, then `config`, then ``ORDRE_``
    prefixed environment variables.

    :return: flask app
    """
    app = Flask(name)
    app.config.from_object('chez.ordre.config.DefaultConfig')
    if config:
        app.config.from_object(config)
    app.config.from_prefixed_env('ORDRE')

    if app.config['LOG_SETUP']:
        setup_logging(app.config['LOG_LEVEL'])

    root_directory = app.config['ROOT_DIRECTORY']
    if not os.path.exists(root_directory):
        os.makedirs(root_directory)

    db.init_app(app)
    app.register_blueprint(api)

    with app.app_context():
        db.create_all()
        logger.debug("Using database %s",
                     db.engine.url.render_as_string(hide_password=True))

    return app
