"""
Search Service

Compiles raw search text into label filters and free-text tokens, then
ranks candidate recipes against the tokens with the fuzzy matcher.
"""

import logging
import re

from constants import DEFAULT_MIN_CONFIDENCE, TOKEN_SEPARATORS
from .entities import MatchResult, SearchQuery
from .matching import field_value, score_token

log = logging.getLogger(__name__)

_SEPARATOR_CHARS = r'\s,،'


def tokenize(text):
    """Split on whitespace and commas (Hebrew comma included), dropping empties and repeats."""
    tokens = []
    seen = set()
    for part in re.split(TOKEN_SEPARATORS, str(text or '')):
        part = part.strip()
        key = part.lower()
        if part and key not in seen:
            seen.add(key)
            tokens.append(part)
    return tokens


def _label_pattern(name, flags):
    # The name must stand alone between separators, not inside a word
    return re.compile(
        rf'(?<![^{_SEPARATOR_CHARS}]){re.escape(name)}(?![^{_SEPARATOR_CHARS}])',
        flags,
    )


def compile_search(raw_text, known_labels):
    """
    Pull label names out of the search text.

    Names are tried longest first, Hebrew exactly and English ignoring case.
    A matched name is cut out of the text so it never also becomes a token.
    """
    text = str(raw_text or '')

    names = []
    for label in known_labels or []:
        label_id = field_value(label, 'id', None)
        for name, flags in ((field_value(label, 'name_he'), 0), (field_value(label, 'name_en'), re.IGNORECASE)):
            name = str(name).strip()
            if name:
                names.append((name, label_id, flags))
    names.sort(key=lambda entry: len(entry[0]), reverse=True)

    label_ids = set()
    for name, label_id, flags in names:
        text, count = _label_pattern(name, flags).subn(' ', text)
        if count:
            label_ids.add(label_id)

    query = SearchQuery(label_ids=label_ids, tokens=tokenize(text))
    log.debug("Compiled search %r -> labels=%s tokens=%s", raw_text, sorted(label_ids), query.tokens)
    return query


def recipe_label_ids(recipe):
    ids = set()
    for label in field_value(recipe, 'labels', []) or []:
        label_id = field_value(label, 'id', None)
        if label_id is not None:
            ids.add(label_id)
    return ids


def score_recipe(tokens, recipe):
    """Sum token scores; the recipe all-matches only if every token scored."""
    total = 0
    all_matched = True
    for token in tokens:
        score = score_token(token, recipe)
        if score == 0:
            all_matched = False
        total += score
    return MatchResult(total_score=total, all_matched=all_matched)


def rank_recipes(tokens, candidates, label_ids=None, min_confidence=DEFAULT_MIN_CONFIDENCE):
    """
    Rank candidate recipe records against search tokens.

    Candidates missing any of label_ids are dropped first. With no tokens the
    remaining candidates come back in their given order. Otherwise recipes
    matching every token come first, each group by descending total score;
    recipes scoring 0 are dropped, as are multi-token matches whose average
    score per token falls below min_confidence.
    """
    candidates = list(candidates)
    if label_ids:
        wanted = set(label_ids)
        candidates = [c for c in candidates if wanted <= recipe_label_ids(c)]

    if not tokens:
        return candidates

    scored = []
    for recipe in candidates:
        result = score_recipe(tokens, recipe)
        if result.total_score <= 0:
            continue
        if len(tokens) > 1 and result.total_score / len(tokens) < min_confidence:
            continue
        scored.append((result, recipe))

    scored.sort(key=lambda item: (not item[0].all_matched, -item[0].total_score))
    return [recipe for _result, recipe in scored]
