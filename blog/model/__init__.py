"""Model package - Database connection and article logic"""
from .database import connection
from .article_model import ArticleModel, DEFAULT_ARTICLES

__all__ = ['connection', 'ArticleModel', 'DEFAULT_ARTICLES']
