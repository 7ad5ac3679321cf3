"""
Fuzzy Matching Service

Scores a search token against labels, ingredient lists and recipe text.
Comparison is case-insensitive (which leaves Hebrew untouched, so Hebrew is
compared exactly). Scores run from 0 (no match) to 100 (exact match).
"""

from collections.abc import Mapping

from constants import (
    EXACT_SCORE, SUBSTRING_SCORE, FUZZY_BASE_SCORE,
    TITLE_SUBSTRING_SCORE, DESCRIPTION_SUBSTRING_SCORE, FUZZY_TITLE_BASE_SCORE,
    DISTANCE_PENALTY, SHORT_TOKEN_LENGTH, SHORT_TOKEN_MAX_DISTANCE, LONG_TOKEN_MAX_DISTANCE,
)
from .parsing import load_ingredients


def field_value(record, name, default=''):
    """Read a field from a dict record or a model object."""
    if isinstance(record, Mapping):
        value = record.get(name, default)
    else:
        value = getattr(record, name, default)
    return default if value is None else value


def _fold(text):
    return str(text or '').strip().lower()


def levenshtein(a, b):
    """Edit distance with unit cost insert/delete/substitute (no transpositions)."""
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def max_distance(token):
    """Edit budget for a token; short words get less slack."""
    if len(token) <= SHORT_TOKEN_LENGTH:
        return SHORT_TOKEN_MAX_DISTANCE
    return LONG_TOKEN_MAX_DISTANCE


def closest_distance(token, text, limit):
    """
    Smallest edit distance between token and text or any word of text.

    Returns limit + 1 when nothing is within limit; lengths further apart
    than limit are skipped without computing a distance.
    """
    best = limit + 1
    words = text.split()
    candidates = [text] + words if len(words) > 1 else [text]
    for candidate in candidates:
        if abs(len(candidate) - len(token)) > limit:
            continue
        best = min(best, levenshtein(token, candidate))
        if best == 0:
            break
    return best


def fuzzy_match(token, candidate):
    """
    Score a token against one candidate string.

    Returns (matched, score): exact 100, substring either way 80, within
    the edit budget 60 minus a penalty per edit, otherwise (False, 0).
    """
    token = _fold(token)
    candidate = _fold(candidate)
    if not token or not candidate:
        return False, 0

    if token == candidate:
        return True, EXACT_SCORE
    if token in candidate or candidate in token:
        return True, SUBSTRING_SCORE

    limit = max_distance(token)
    distance = closest_distance(token, candidate, limit)
    if distance <= limit:
        return True, FUZZY_BASE_SCORE - distance * DISTANCE_PENALTY
    return False, 0


def match_label(token, label):
    """Best score of the token against a label's Hebrew and English names."""
    score = max(
        fuzzy_match(token, field_value(label, 'name_he'))[1],
        fuzzy_match(token, field_value(label, 'name_en'))[1],
    )
    return score > 0, score


def match_ingredients(token, ingredients):
    """Best score of the token against any ingredient name (JSON text or list)."""
    best = 0
    for ingredient in load_ingredients(ingredients):
        best = max(best, fuzzy_match(token, ingredient.name)[1])
        if best == EXACT_SCORE:
            break
    return best > 0, best


def match_text(token, recipe):
    """
    Score the token against title and description in both languages.

    A substring hit in a title (90) beats one in a description (70); only
    without either is the token compared word by word against the titles.
    """
    token = _fold(token)
    if not token:
        return False, 0

    titles = [_fold(field_value(recipe, 'title_he')), _fold(field_value(recipe, 'title_en'))]
    if any(token in title for title in titles):
        return True, TITLE_SUBSTRING_SCORE

    descriptions = [_fold(field_value(recipe, 'description_he')), _fold(field_value(recipe, 'description_en'))]
    if any(token in description for description in descriptions):
        return True, DESCRIPTION_SUBSTRING_SCORE

    best = 0
    limit = max_distance(token)
    for title in titles:
        for word in title.split():
            if abs(len(word) - len(token)) > limit:
                continue
            distance = levenshtein(token, word)
            if distance <= limit:
                best = max(best, FUZZY_TITLE_BASE_SCORE - distance * DISTANCE_PENALTY)
    return best > 0, best


def score_token(token, recipe):
    """Best score of one token across every channel of a recipe record."""
    scores = [
        match_text(token, recipe)[1],
        match_ingredients(token, field_value(recipe, 'ingredients_he', '[]'))[1],
        match_ingredients(token, field_value(recipe, 'ingredients_en', '[]'))[1],
    ]
    for label in field_value(recipe, 'labels', []) or []:
        scores.append(match_label(token, label)[1])
    return max(scores)
