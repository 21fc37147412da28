"""
Game content: word categories and front-end message text.
"""

from .categories import Category, CategorySource, ContentError, DEFAULT_CATEGORIES, load_categories_from_yaml
from .messages import MessageId, MessageCatalog, DEFAULT_MESSAGES, load_messages_from_yaml

__all__ = [
    'Category',
    'CategorySource',
    'ContentError',
    'DEFAULT_CATEGORIES',
    'load_categories_from_yaml',
    'MessageId',
    'MessageCatalog',
    'DEFAULT_MESSAGES',
    'load_messages_from_yaml',
]
