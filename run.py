"""
Blog Backend Entry Point
Serves the article API and the pre-built front end.
"""
import argparse
import logging
import sys

from blog import create_app
from blog.model import ArticleModel, connection
from blog.utils.config import Config, ConfigurationError


def setup_logging(verbose: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def seed(app) -> list:
    """Insert the default articles that are not in the database yet."""
    with connection(
        connection_string=app.config['MONGODB_URI'],
        database_name=app.config['MONGODB_DB'],
        timeout_ms=app.config['MONGODB_TIMEOUT_MS']
    ) as db:
        return ArticleModel(db, app.config['MONGODB_COLLECTION']).seed_articles()


def main(argv=None):
    """Run the blog backend"""
    parser = argparse.ArgumentParser(
        description='Blog Backend - Article API and front-end server'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging (DEBUG level)'
    )

    parser.add_argument(
        '--seed',
        action='store_true',
        help='Insert the default articles if missing and exit'
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    # Validate configuration
    try:
        Config.validate()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    app = create_app()

    if args.seed:
        try:
            inserted = seed(app)
        except Exception as e:
            logger.error(f"Failed to seed articles: {e}")
            logger.error("Please ensure MongoDB is running")
            sys.exit(1)
        logger.info(f"Seeded {len(inserted)} article(s)")
        return

    logger.info(f"Listening on port {Config.PORT}")
    app.run(
        host=Config.HOST,
        port=Config.PORT,
        debug=Config.DEBUG,
        use_reloader=Config.DEBUG
    )


if __name__ == '__main__':
    main()
