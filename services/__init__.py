"""
Services Package

Parsing, conversion, matching and search logic for the recipe catalogue.
"""

from .entities import (
    Ingredient,
    EquipmentItem,
    RecipeDraft,
    MatchResult,
    SearchQuery,
)

from .parsing import (
    parse_fraction,
    normalize_unit,
    strip_list_marker,
    looks_like_ingredient,
    parse_ingredient_line,
    ingredient_from_dict,
    load_ingredients,
    dump_ingredients,
)

from .conversion import (
    convert_ingredient,
    convert_ingredients,
    format_qty,
)

from .freetext import parse_free_text

from .matching import (
    levenshtein,
    fuzzy_match,
    match_label,
    match_ingredients,
    match_text,
    score_token,
)

from .search import (
    tokenize,
    compile_search,
    score_recipe,
    rank_recipes,
)

from .translation import fetch_translation, translate, TranslationError

from .bilingual import build_bilingual_record, other_language

__all__ = [
    # Entities
    'Ingredient',
    'EquipmentItem',
    'RecipeDraft',
    'MatchResult',
    'SearchQuery',
    # Parsing
    'parse_fraction',
    'normalize_unit',
    'strip_list_marker',
    'looks_like_ingredient',
    'parse_ingredient_line',
    'ingredient_from_dict',
    'load_ingredients',
    'dump_ingredients',
    # Conversion
    'convert_ingredient',
    'convert_ingredients',
    'format_qty',
    # Free text
    'parse_free_text',
    # Matching
    'levenshtein',
    'fuzzy_match',
    'match_label',
    'match_ingredients',
    'match_text',
    'score_token',
    # Search
    'tokenize',
    'compile_search',
    'score_recipe',
    'rank_recipes',
    # Translation
    'fetch_translation',
    'translate',
    'TranslationError',
    'build_bilingual_record',
    'other_language',
]
