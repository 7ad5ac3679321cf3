"""
Label Model

Short bilingual tags (e.g. "Breakfast" / "ארוחת בוקר") used for filtering.
"""

from .base import db


class Label(db.Model):
    """Bilingual label with an optional emoji."""
    __tablename__ = 'labels'

    id = db.Column(db.Integer, primary_key=True)
    name_he = db.Column(db.String(100), nullable=False)
    name_en = db.Column(db.String(100), nullable=False)
    emoji = db.Column(db.String(16), default='')

    def to_dict(self):
        return {'id': self.id, 'name_he': self.name_he, 'name_en': self.name_en, 'emoji': self.emoji or ''}
