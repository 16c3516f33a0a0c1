import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_config

# Load environment variables from .env file
load_dotenv()

# Initialize logger
logger = logging.getLogger(__name__)

__version__ = "0.1.0"

__all__ = ["create_app", "__version__"]


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_name: Name of the configuration to use ("development", "testing",
                    "production"). Defaults to the FLASK_ENV environment variable.
    Returns:
        Flask: The configured Flask application instance.
    """
    config = get_config(config_name)

    # Create the Flask application
    app = Flask(__name__)

    # Load configuration from config object
    app.config.from_object(config)

    # Configure app components
    _configure_app_settings(app)
    _configure_logging(app)
    _initialize_components(app)
    _initialize_cli(app)

    return app


def _configure_app_settings(app: Flask) -> None:
    """Configure basic application settings and validation."""
    # Ensure required config values are set
    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        raise ValueError("SQLALCHEMY_DATABASE_URI is not configured")

    # Set default SQLAlchemy config if not set
    app.config.setdefault("SQLALCHEMY_TRACK_MODIFICATIONS", False)
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)


def _configure_logging(app: Flask) -> None:
    """Configure application logging."""
    log_level = logging.DEBUG if app.debug else getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO)
    logging.basicConfig(level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logger.setLevel(log_level)
    app.logger.setLevel(log_level)

    # Log app configuration
    logger.debug("Application configuration:")
    logger.debug(f"- ENV: {app.config.get('ENVIRONMENT', 'Not set')}")
    logger.debug(f"- DEBUG: {app.debug}")
    logger.debug(f"- DATABASE_URI: {app.config.get('SQLALCHEMY_DATABASE_URI', 'Not set')}")


def _initialize_components(app: Flask) -> None:
    """Initialize core application components."""
    from .database import init_database
    from .extensions import db
    from .extensions import init_app as init_extensions
    from .restaurants.repository import RestaurantRepository
    from .restaurants.services import EXTENSION_KEY, RestaurantService

    # Initialize extensions
    init_extensions(app)

    # Initialize the database
    init_database(app)

    # One storage handle and one service per application, looked up by the route handlers
    app.extensions[EXTENSION_KEY] = RestaurantService(RestaurantRepository(db.session))
    logger.debug("Restaurant service initialized")

    # Register blueprints
    _register_blueprints(app)

    # Register error handlers
    from .errors import init_app as init_errors

    init_errors(app)
    logger.debug("Registered error handlers")

    # Log registered routes
    _log_registered_routes(app)


def _initialize_cli(app: Flask) -> None:
    """Initialize CLI commands."""
    from .restaurants.cli import register_commands as register_restaurant_commands

    register_restaurant_commands(app)
    logger.debug("Initialized CLI commands")


def _register_blueprints(app: Flask) -> None:
    """Register all application blueprints."""
    logger.debug("Registering blueprints...")

    from .health import bp as health_bp
    from .restaurants import bp as restaurants_bp

    restaurants_prefix = app.config.get("RESTAURANTS_URL_PREFIX") or None
    app.register_blueprint(restaurants_bp, url_prefix=restaurants_prefix)
    logger.debug(f"Registered blueprint: {restaurants_bp.name} at {restaurants_prefix or '/'}")

    app.register_blueprint(health_bp, url_prefix="/health")
    logger.debug(f"Registered blueprint: {health_bp.name} at /health")


def _log_registered_routes(app: Flask) -> None:
    """Log all registered routes for debugging."""
    logger.debug("Registered routes:")
    for rule in app.url_map.iter_rules():
        methods = list(rule.methods - {"OPTIONS", "HEAD"})
        logger.debug(f"  {rule.endpoint}: {rule.rule} {methods}")
