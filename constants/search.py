"""
Search Scoring Constants

Scores and thresholds for fuzzy recipe search. All scores are on a
0-100 scale where 0 means no match.
"""

EXACT_SCORE = 100
SUBSTRING_SCORE = 80
FUZZY_BASE_SCORE = 60

TITLE_SUBSTRING_SCORE = 90
DESCRIPTION_SUBSTRING_SCORE = 70
FUZZY_TITLE_BASE_SCORE = 50

# Score lost per edit; FUZZY_TITLE_BASE_SCORE - LONG_TOKEN_MAX_DISTANCE * this must stay > 0
DISTANCE_PENALTY = 5

# Tokens up to this length tolerate fewer edits
SHORT_TOKEN_LENGTH = 4
SHORT_TOKEN_MAX_DISTANCE = 1
LONG_TOKEN_MAX_DISTANCE = 2

# Minimum average score per token for multi-token queries
DEFAULT_MIN_CONFIDENCE = 20

# Token separators: whitespace, comma, Arabic/Hebrew comma
TOKEN_SEPARATORS = r'[\s,،]+'
