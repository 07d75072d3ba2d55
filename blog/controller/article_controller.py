"""
Article Controller - Handles article API routes and the front-end catch-all
"""
import logging
import os
from typing import Callable

from flask import current_app, jsonify, request, send_from_directory
from pymongo.database import Database

from ..model.article_model import ArticleModel
from ..model.database import connection

logger = logging.getLogger(__name__)


class ArticleController:
    """Controller for article operations"""

    def with_db(self, operation: Callable[[Database], object]):
        """
        Run one operation against a freshly opened database handle.

        Any exception raised while connecting or inside the operation is
        turned into a 500 response. The handle is closed either way.
        """
        config = current_app.config
        try:
            with connection(
                connection_string=config['MONGODB_URI'],
                database_name=config['MONGODB_DB'],
                timeout_ms=config['MONGODB_TIMEOUT_MS']
            ) as db:
                return operation(db)
        except Exception as e:
            logger.error(f"Database operation failed on {request.path}: {e}")
            return jsonify({
                "message": "Error connecting to db",
                "error": str(e)
            }), 500

    def _articles(self, db: Database) -> ArticleModel:
        return ArticleModel(db, current_app.config['MONGODB_COLLECTION'])

    def get_article(self, name: str):
        """API endpoint for single article"""
        def operation(db):
            return jsonify(self._articles(db).get_article(name)), 200

        return self.with_db(operation)

    def upvote(self, name: str):
        """API endpoint to upvote an article"""
        def operation(db):
            return jsonify(self._articles(db).upvote_article(name)), 200

        return self.with_db(operation)

    def add_comment(self, name: str):
        """API endpoint to append a comment to an article"""
        # Malformed JSON is rejected with a 400 before any database work
        if request.is_json and request.get_data():
            data = request.get_json()
        else:
            data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        def operation(db):
            article = self._articles(db).add_comment(
                name,
                username=data.get('username'),
                text=data.get('text')
            )
            return jsonify(article), 200

        return self.with_db(operation)

    def frontend(self, path: str = ''):
        """Serve a built asset, falling back to index.html for client-side routes"""
        build_dir = current_app.config['BUILD_DIR']
        if path and os.path.isfile(os.path.join(build_dir, path)):
            return send_from_directory(build_dir, path)
        return send_from_directory(build_dir, 'index.html')
