"""
Validation Constants

Contains whitelist values and limits for validating user input.
"""

# Languages a recipe is stored in
SUPPORTED_LANGUAGES = ('he', 'en')

# Maximum field lengths
MAX_LENGTHS = {
    'title': 200,
    'description': 2000,
    'instructions': 50000,
    'label_name': 100,
    'emoji': 16,
    'image_url': 500,
    'course': 100,
    'cuisine': 100,
    'freetext': 100000,
}

# Rating bounds (inclusive)
MIN_RATING = 0
MAX_RATING = 10

# Allowed image extensions
ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
