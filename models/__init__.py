"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .label import Label
from .recipe import Recipe, recipe_labels

__all__ = [
    'db',
    'Label',
    'Recipe',
    'recipe_labels',
]
