import logging
import sys

from flask import Flask

from routes.games import bp as games_bp
from routes.pokemon import bp as pokemon_bp
from routes.status import bp as status_bp
from services.core import load_settings
from services.importer import Importer
from services.store import PokemonStore

logger = logging.getLogger(__name__)


def setup_logging(level: str = 'INFO') -> logging.Logger:
    """Configure the root logger once: one stream handler, level from config."""
    numeric = getattr(logging, str(level).upper(), logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
        root.addHandler(handler)
    root.setLevel(numeric)
    return root


def create_app(config: dict | None = None, store: PokemonStore | None = None,
               importer: Importer | None = None) -> Flask:
    app = Flask(__name__)
    app.json.sort_keys = False
    app.config.update(load_settings())
    if config:
        app.config.update(config)

    store = store if store is not None else PokemonStore()
    if importer is None:
        importer = Importer(
            store,
            base_url=app.config['POKEAPI_BASE'],
            limit=app.config['POKEMON_LIMIT'],
            timeout=app.config['REQUEST_TIMEOUT'],
        )
    app.extensions['pokemon_store'] = store
    app.extensions['pokemon_importer'] = importer

    app.register_blueprint(pokemon_bp)
    app.register_blueprint(games_bp)
    app.register_blueprint(status_bp)
    return app


def main() -> int:
    app = create_app()
    setup_logging(app.config['LOG_LEVEL'])
    # The catalog must be fully loaded before the first request is served.
    logger.info("Initializing storage with data from PokeAPI...")
    try:
        app.extensions['pokemon_importer'].initialize()
    except Exception as e:
        logger.critical("Startup import failed: %s", e)
        return 1
    logger.info("Storage initialized successfully!")
    app.run(host=app.config['HOST'], port=app.config['PORT'])
    return 0


if __name__ == '__main__':
    sys.exit(main())
