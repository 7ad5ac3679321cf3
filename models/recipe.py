"""
Recipe Models

Contains the Recipe model and the recipe_labels association table.
Text fields come in _he/_en pairs; ingredient lists, nutrition and
equipment are stored as JSON text.
"""

import json

from .base import db

recipe_labels = db.Table(
    'recipe_labels',
    db.Column('recipe_id', db.Integer, db.ForeignKey('recipes.id', ondelete='CASCADE'), primary_key=True),
    db.Column('label_id', db.Integer, db.ForeignKey('labels.id', ondelete='CASCADE'), primary_key=True),
)


def _load_json(raw, default):
    try:
        value = json.loads(raw) if raw else default
    except ValueError:
        return default
    return value if isinstance(value, type(default)) else default


class Recipe(db.Model):
    """Bilingual recipe with optional metadata and label associations."""
    __tablename__ = 'recipes'

    id = db.Column(db.Integer, primary_key=True)
    title_he = db.Column(db.String(200), nullable=False, default='')
    title_en = db.Column(db.String(200), nullable=False, default='')
    description_he = db.Column(db.Text, default='')
    description_en = db.Column(db.Text, default='')
    ingredients_he = db.Column(db.Text, default='[]')
    ingredients_en = db.Column(db.Text, default='[]')
    instructions_he = db.Column(db.Text, default='')
    instructions_en = db.Column(db.Text, default='')
    image_url = db.Column(db.String(500), default='')
    tried = db.Column(db.Boolean, default=False, index=True)
    rating = db.Column(db.Float, nullable=True)  # only kept while tried

    # Captured by the free-text parser
    prep_time = db.Column(db.Integer, nullable=True)  # minutes
    cook_time = db.Column(db.Integer, nullable=True)  # minutes
    servings = db.Column(db.Integer, nullable=True)
    course = db.Column(db.String(100), default='')
    cuisine = db.Column(db.String(100), default='')
    nutrition = db.Column(db.Text, default='{}')
    equipment = db.Column(db.Text, default='[]')

    created_at = db.Column(db.DateTime, server_default=db.func.current_timestamp(), index=True)

    labels = db.relationship('Label', secondary=recipe_labels, lazy='selectin', order_by='Label.id')

    def to_dict(self):
        return {
            'id': self.id,
            'title_he': self.title_he or '',
            'title_en': self.title_en or '',
            'description_he': self.description_he or '',
            'description_en': self.description_en or '',
            'ingredients_he': self.ingredients_he or '[]',
            'ingredients_en': self.ingredients_en or '[]',
            'instructions_he': self.instructions_he or '',
            'instructions_en': self.instructions_en or '',
            'image_url': self.image_url or '',
            'tried': bool(self.tried),
            'rating': self.rating,
            'prep_time': self.prep_time,
            'cook_time': self.cook_time,
            'servings': self.servings,
            'course': self.course or '',
            'cuisine': self.cuisine or '',
            'nutrition': _load_json(self.nutrition, {}),
            'equipment': _load_json(self.equipment, []),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'labels': [label.to_dict() for label in self.labels],
        }
