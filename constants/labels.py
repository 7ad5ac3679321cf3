"""
Label Constants

Default bilingual labels seeded into an empty store.
"""

# (name_he, name_en, emoji)
DEFAULT_LABELS = [
    ('ארוחת בוקר', 'Breakfast', '☀️'),
    ('ארוחת צהריים', 'Lunch', '🥪'),
    ('ארוחת ערב', 'Dinner', '🍽️'),
    ('קינוח', 'Dessert', '🍰'),
    ('חטיף', 'Snack', '🍿'),
    ('משקה', 'Drink', '🥤'),
    ('איטלקי', 'Italian', '🍝'),
    ('מקסיקני', 'Mexican', '🌮'),
    ('אסייתי', 'Asian', '🥢'),
    ('אמריקאי', 'American', '🍔'),
    ('ים תיכוני', 'Mediterranean', '🫒'),
]
