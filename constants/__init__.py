"""
Constants Package

Data tables for unit parsing, free-text sections, search scoring,
default labels and input validation.
"""

from .units import (
    UNIT_CODES, DEFAULT_UNIT, UNIT_MAPPINGS, METRIC_UNITS, IMPERIAL_UNITS,
    UNIT_SYSTEMS, UNIT_CONVERSIONS, UNICODE_FRACTIONS,
)
from .sections import (
    SECTION_HEADERS, METADATA_FIELDS, NUTRIENTS, TIME_FIELDS,
    HEADER_PATTERNS, METADATA_PATTERNS, HOURS_PATTERN, NUTRIENT_PATTERNS,
)
from .search import (
    EXACT_SCORE, SUBSTRING_SCORE, FUZZY_BASE_SCORE, TITLE_SUBSTRING_SCORE,
    DESCRIPTION_SUBSTRING_SCORE, FUZZY_TITLE_BASE_SCORE, DISTANCE_PENALTY,
    SHORT_TOKEN_LENGTH, SHORT_TOKEN_MAX_DISTANCE, LONG_TOKEN_MAX_DISTANCE,
    DEFAULT_MIN_CONFIDENCE, TOKEN_SEPARATORS,
)
from .labels import DEFAULT_LABELS
from .validation import (
    SUPPORTED_LANGUAGES, MAX_LENGTHS, MIN_RATING, MAX_RATING, ALLOWED_EXTENSIONS,
)
