from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)

EXTENSION_KEY = 'wordtower'


def current_session():
    """Return the GameSession bound to the running app."""
    return current_app.extensions[EXTENSION_KEY]


def create_app(config_class=Config, gateway=None, session=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])

    CORS(flask_app, supports_credentials=True, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One game session per app; state lives in memory for the process lifetime
    from wordtower.services.towers.session import GameSession, load_catalog
    if session is None:
        session = GameSession.from_config(flask_app.config, gateway=gateway)
    flask_app.extensions[EXTENSION_KEY] = session

    from wordtower.main import main
    flask_app.register_blueprint(main)

    from wordtower.api.towers import towers
    flask_app.register_blueprint(towers, url_prefix='/api')

    from wordtower.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('catalog-check')
    def catalog_check_command():
        """Loads the configured word catalog and reports its size."""
        try:
            catalog = load_catalog(flask_app.config)
        except (OSError, ValueError) as exc:
            raise click.ClickException(f"Catalog failed to load: {exc}")
        source = flask_app.config.get('WORDS_FILE') or 'built-in list'
        click.echo(f"{len(catalog)} words loaded from {source}")

    flask_app.cli.add_command(catalog_check_command)

    return flask_app
