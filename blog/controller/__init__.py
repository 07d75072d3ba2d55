"""Controller package - HTTP route handlers"""
from .article_controller import ArticleController

__all__ = ['ArticleController']
