"""
Flask Application Factory for the blog backend
"""
import logging
from typing import Optional

from flask import Flask

from .utils.config import Config

logger = logging.getLogger(__name__)


class FlaskApp:
    """Flask application factory"""

    def __init__(self):
        self._app: Optional[Flask] = None

    def create_app(self, config: Optional[dict] = None) -> Flask:
        """Create and configure the Flask application"""
        # Static files are served by the catch-all route instead
        self._app = Flask(__name__, static_folder=None)

        # Default configuration from environment variables
        self._app.config.update(Config.as_flask_config())
        self._app.json.sort_keys = False

        # Update with custom config if provided
        if config:
            self._app.config.update(config)

        # Register blueprints/routes
        self._register_routes()

        logger.debug(f"Created app for database: {self._app.config['MONGODB_DB']}")
        return self._app

    def _register_routes(self):
        """Register application routes"""
        from .controller.article_controller import ArticleController

        articles = ArticleController()

        # API routes
        self._app.add_url_rule('/api/articles/<path:name>', 'api_article', articles.get_article)
        self._app.add_url_rule('/api/articles/<path:name>/upvote', 'api_article_upvote',
                               articles.upvote, methods=['POST'])
        self._app.add_url_rule('/api/articles/<path:name>/add-comment', 'api_article_add_comment',
                               articles.add_comment, methods=['POST'])

        # Front-end catch-all
        self._app.add_url_rule('/', 'frontend_index', articles.frontend)
        self._app.add_url_rule('/<path:path>', 'frontend', articles.frontend)


def create_app(config: Optional[dict] = None) -> Flask:
    """Factory function to create Flask app"""
    app_factory = FlaskApp()
    return app_factory.create_app(config)
