from dotenv import load_dotenv
from flask import Flask
from flasgger import Swagger

from .config import Config
from .errors import register_error_handlers
from .extensions import db, migrate, ma
from .middleware.request_id import init_request_id
from .services import ResultsService, VoteService
from .store import VoteStore
from .swagger_config import swagger_template

load_dotenv()


def create_app(config_class=Config) -> Flask:
    app = Flask(__name__, static_folder="static", static_url_path="/static")
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    Swagger(app, template=swagger_template(app))

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    ma.init_app(app)

    # Middleware + errors
    init_request_id(app)
    register_error_handlers(app)

    # Store + services, shared for the life of the app
    store = VoteStore(db, app)
    app.extensions["vote_service"] = VoteService(store)
    app.extensions["results_service"] = ResultsService(store)

    # Blueprint imports
    from .api.voting.routes import voting_bp
    from .api.results.routes import results_bp
    from .api.pages.routes import pages_bp

    # Blueprints
    app.register_blueprint(voting_bp, url_prefix="/api")
    app.register_blueprint(results_bp, url_prefix="/api")
    app.register_blueprint(pages_bp)

    # Health check
    @app.get("/health")
    def health():
        if store.ready or store.connect():
            return {"status": "ok", "store": "ready"}, 200
        return {"status": "degraded", "store": "unavailable"}, 503

    return app
