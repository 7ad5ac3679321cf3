"""
Parsing Service

Functions for parsing ingredient lines, quantities and units from recipe text.
Every function here is total: unparseable input yields a default, never an error.
"""

import json
import logging
import math
import re

from constants import UNIT_CODES, DEFAULT_UNIT, UNIT_MAPPINGS, UNICODE_FRACTIONS
from .entities import Ingredient

log = logging.getLogger(__name__)

_FRACTION_CHARS = ''.join(UNICODE_FRACTIONS)

# Leading quantity: digits, decimal points, slashes and fraction glyphs
_QTY = rf'[\d{_FRACTION_CHARS}][\d{_FRACTION_CHARS}/.]*'

# Longest synonyms first so "fl oz" wins over "oz"
_UNITS = '|'.join(re.escape(u) for u in sorted(UNIT_MAPPINGS, key=len, reverse=True))

# qty [second qty for "1 ½"] [unit as a whole word, "tsp." style dot allowed] name
INGREDIENT_PATTERN = re.compile(
    rf'^({_QTY}(?:\s*{_QTY})?)\s*(?:({_UNITS})\.?(?![^\W\d_]))?\s*(.*)$',
    re.IGNORECASE | re.DOTALL,
)

BULLET_PATTERN = re.compile(r'^[-–•·*]\s*')
NUMBERING_PATTERN = re.compile(r'^\d+[.)](?!\d)\s*')
INGREDIENT_START_PATTERN = re.compile(rf'^(?:[\d{_FRACTION_CHARS}]|[-–•·]\s*\S|\*(?!\*)\s*\S)')
MIXED_FRACTION_PATTERN = re.compile(r'^(\d+)\s+(\d+)\s*/\s*(\d+)$')


def _to_float(s):
    """float() that returns 0 for anything unparseable, negative or non-finite."""
    try:
        value = float(s)
    except (ValueError, TypeError):
        return 0
    if not math.isfinite(value) or value < 0:
        return 0
    return value


def _clean_number(value):
    """Render whole floats as ints so 200.0 is stored as 200."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def parse_fraction(value):
    """
    Parse a quantity string into a number.

    Handles vulgar fractions ('½'), whole + glyph ('1½', '1 ½'), slash
    fractions ('3/4', '1 1/2') and decimals. Returns 0 when nothing parses;
    a zero denominator counts as unparseable.
    """
    if value is None:
        return 0
    s = str(value).strip()
    if not s:
        return 0

    if s in UNICODE_FRACTIONS:
        return UNICODE_FRACTIONS[s]

    for char, frac in UNICODE_FRACTIONS.items():
        if char in s:
            whole = s.replace(char, '').strip()
            return (_to_float(whole) if whole else 0) + frac

    mixed = MIXED_FRACTION_PATTERN.match(s)
    if mixed:
        whole, num, den = (_to_float(g) for g in mixed.groups())
        if den:
            return whole + num / den

    if '/' in s:
        num, _, den = s.partition('/')
        den = _to_float(den)
        if den:
            return _to_float(num) / den

    return _to_float(s)


def normalize_unit(unit):
    """Map a unit word (English or Hebrew, any case) to its unit code; unknown -> 'pcs'."""
    if not unit:
        return DEFAULT_UNIT
    key = ' '.join(str(unit).split()).lower()
    return UNIT_MAPPINGS.get(key, DEFAULT_UNIT)


def strip_list_marker(line):
    """Remove a leading bullet/dash and a '1.' or '1)' numbering marker."""
    line = BULLET_PATTERN.sub('', line)
    line = NUMBERING_PATTERN.sub('', line)
    return line.strip()


def looks_like_ingredient(line):
    """Line starts with a quantity, or with a bullet followed by text."""
    return bool(INGREDIENT_START_PATTERN.match(line or ''))


def parse_ingredient_line(line):
    """Parse a line like '200g flour' or '1 ½ כוסות סוכר' into an Ingredient."""
    line = strip_list_marker(str(line or '').strip())

    match = INGREDIENT_PATTERN.match(line)
    if match:
        return Ingredient(
            qty=_clean_number(parse_fraction(match.group(1))),
            unit=normalize_unit(match.group(2)),
            name=match.group(3).strip(),
        )

    return Ingredient(qty=0, unit=DEFAULT_UNIT, name=line)


def ingredient_from_dict(data):
    """Build an Ingredient from a stored {qty, unit, name} mapping, repairing bad fields."""
    qty = data.get('qty')
    if isinstance(qty, bool) or not isinstance(qty, (int, float)):
        qty = parse_fraction(qty)
    elif not math.isfinite(qty) or qty < 0:
        qty = 0
    unit = data.get('unit')
    if unit not in UNIT_CODES:
        unit = normalize_unit(unit)
    return Ingredient(qty=_clean_number(qty), unit=unit, name=str(data.get('name') or '').strip())


def load_ingredients(raw):
    """
    Decode a stored ingredient array.

    Accepts a JSON string or an already-decoded list. Legacy plain-string
    entries become name-only ingredients. Malformed JSON or a non-array
    yields an empty list.
    """
    if not raw:
        return []

    items = raw
    if isinstance(raw, (str, bytes)):
        try:
            items = json.loads(raw)
        except (ValueError, RecursionError):
            log.debug("Ignoring malformed ingredient JSON: %.80r", raw)
            return []

    if not isinstance(items, list):
        return []

    ingredients = []
    for item in items:
        if isinstance(item, Ingredient):
            ingredients.append(item)
        elif isinstance(item, str):
            ingredients.append(Ingredient(qty=0, unit=DEFAULT_UNIT, name=item.strip()))
        elif isinstance(item, dict):
            ingredients.append(ingredient_from_dict(item))
    return ingredients


def dump_ingredients(ingredients):
    """Encode ingredients for storage; accepts Ingredient objects or mappings."""
    return json.dumps(
        [i.to_dict() if isinstance(i, Ingredient) else ingredient_from_dict(i).to_dict() for i in ingredients or []],
        ensure_ascii=False,
    )
