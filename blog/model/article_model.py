"""
Article Model - Reads and read-modify-write updates on blog articles
"""
import logging
from typing import List, Dict, Any, Optional

from pymongo.database import Database

logger = logging.getLogger(__name__)

DEFAULT_ARTICLES = ['learn-react', 'learn-node', 'my-thoughts-on-resumes']


class ArticleModel:
    """Article data model bound to one open database handle"""

    def __init__(self, db: Database, collection_name: str = "articles"):
        self.collection = db[collection_name]

    @staticmethod
    def _serialize(article: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        # Convert ObjectId to string for JSON serialization
        if article and '_id' in article:
            return {**article, '_id': str(article['_id'])}
        return article

    def get_article(self, name: str) -> Optional[Dict[str, Any]]:
        """Retrieve a single article by name, or None if there is none"""
        return self._serialize(self.collection.find_one({'name': name}))

    def upvote_article(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Add one upvote to an article and return the re-read document.

        The counter is read, incremented in Python and written back with $set,
        so two concurrent upvotes may both read the same value and one of them
        is lost.

        Raises:
            TypeError: If no article has this name
        """
        article = self.collection.find_one({'name': name})
        self.collection.update_one(
            {'name': name},
            {'$set': {'upvotes': article['upvotes'] + 1}}
        )
        logger.info(f"Upvoted article: {name}")
        return self.get_article(name)

    def add_comment(self, name: str, username: Any, text: Any) -> Optional[Dict[str, Any]]:
        """
        Append a comment to an article and return the re-read document.

        The whole comment list is written back, so concurrent comments on the
        same article can drop one another.

        Raises:
            TypeError: If no article has this name
        """
        article = self.collection.find_one({'name': name})
        comments = article['comments'] + [{'username': username, 'text': text}]
        self.collection.update_one(
            {'name': name},
            {'$set': {'comments': comments}}
        )
        logger.info(f"Added comment to article: {name}")
        return self.get_article(name)

    def seed_articles(self, names: Optional[List[str]] = None) -> List[str]:
        """
        Insert empty articles for the given names unless they already exist.

        Returns:
            Names that were inserted
        """
        inserted = []
        for name in DEFAULT_ARTICLES if names is None else names:
            if self.collection.find_one({'name': name}) is not None:
                logger.debug(f"Article already exists: {name}")
                continue
            self.collection.insert_one({'name': name, 'upvotes': 0, 'comments': []})
            inserted.append(name)
            logger.info(f"Seeded article: {name}")
        return inserted
