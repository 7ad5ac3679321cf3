"""
Free-Text Recipe Parser

Turns a pasted, unstructured recipe into a RecipeDraft. The parser walks the
lines once, classifying each one with a small state machine:

    title -> description -> ingredients -> instructions

with 'nutrition' and 'equipment' as side sections entered through headers.
Metadata lines (prep time, servings, cuisine...) are picked up anywhere.

It is best-effort and never raises: whatever the input, a structurally
valid draft comes back and the user fixes misparses in the form.
"""

import re

from constants import HEADER_PATTERNS, METADATA_PATTERNS, HOURS_PATTERN, NUTRIENT_PATTERNS, TIME_FIELDS
from .entities import EquipmentItem, RecipeDraft
from .parsing import (
    looks_like_ingredient,
    parse_ingredient_line,
    strip_list_marker,
    NUMBERING_PATTERN,
)

DEFAULT_TITLE = 'Untitled Recipe'

TITLE_MAX_LENGTH = 100
STEP_MIN_LENGTH = 60

TITLE_MARKUP = re.compile(r'^#+\s*')
STEP_PATTERN = re.compile(r'^(?:step|שלב)\s*\d', re.IGNORECASE)
SENTENCE_END = ('.', '!', '?')


def _to_int(value):
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def header_section(line):
    """Return the section a header line opens, or None."""
    for section, pattern in HEADER_PATTERNS.items():
        if pattern.match(line):
            return section
    return None


def match_metadata(line):
    """Return (field, value) for a metadata line like 'Prep time: 15 min', else None."""
    for field, pattern in METADATA_PATTERNS.items():
        match = pattern.match(line)
        if not match:
            continue
        if field in TIME_FIELDS:
            minutes = _to_int(match.group(1))
            if minutes is not None and match.group(2) and HOURS_PATTERN.match(match.group(2)):
                # "1 hr 30 min"
                minutes = minutes * 60 + (_to_int(match.group(3)) or 0)
            return field, minutes
        if field == 'servings':
            return field, _to_int(match.group(1))
        return field, match.group(1).strip()
    return None


def match_nutrient(line):
    """Return (nutrient, value) for a line like 'Protein: 12g', else None."""
    for key, pattern in NUTRIENT_PATTERNS:
        match = pattern.match(line)
        if match:
            return key, (match.group(1) or match.group(2)).strip()
    return None


def _next_content_line(lines, start):
    """Next line that is neither blank nor metadata; metadata never changes section."""
    for line in lines[start:]:
        if line and not match_metadata(line):
            return line
    return None


def _starts_instructions(line, ingredients):
    """Decide whether a line inside the ingredient list is really the first step."""
    if STEP_PATTERN.match(line):
        return True
    if NUMBERING_PATTERN.match(line):
        return len(line) > STEP_MIN_LENGTH and not looks_like_ingredient(NUMBERING_PATTERN.sub('', line))
    # Prose after the list: "Mix everything and fry."
    if ingredients and not looks_like_ingredient(line):
        return line.endswith(SENTENCE_END) or len(line) > STEP_MIN_LENGTH
    return False


def parse_free_text(text):
    """Parse pasted recipe text into a RecipeDraft."""
    lines = [line.strip() for line in str(text or '').splitlines()]

    state = 'title'
    title = ''
    description = []
    ingredients = []
    instructions = []
    nutrition = {}
    equipment = []
    metadata = {}

    for index, line in enumerate(lines):
        if not line:
            # A blank line after the ingredient list usually ends it
            if state == 'ingredients' and ingredients and lines[index - 1]:
                upcoming = _next_content_line(lines, index + 1)
                if upcoming and not looks_like_ingredient(upcoming) and not header_section(upcoming):
                    state = 'instructions'
            continue

        meta = match_metadata(line)
        if meta:
            field, value = meta
            metadata[field] = value
            continue

        if state == 'nutrition':
            nutrient = match_nutrient(line)
            if nutrient:
                key, value = nutrient
                nutrition[key] = value
                continue
            state = 'instructions'

        section = header_section(line)
        if section:
            state = section
            continue

        if state == 'title':
            if len(line) < TITLE_MAX_LENGTH and not looks_like_ingredient(line):
                title = TITLE_MARKUP.sub('', line).strip()
                state = 'description'
                continue
            state = 'ingredients'

        if state == 'description':
            if not looks_like_ingredient(line):
                description.append(line)
                continue
            state = 'ingredients'

        if state == 'equipment':
            name = strip_list_marker(line)
            if name:
                equipment.append(EquipmentItem(qty=1, name=name))
            continue

        if state == 'ingredients':
            if not _starts_instructions(line, ingredients):
                ingredients.append(parse_ingredient_line(line))
                continue
            state = 'instructions'

        instructions.append(line)

    if not title:
        title = ingredients[0].name if ingredients and ingredients[0].name else DEFAULT_TITLE

    return RecipeDraft(
        title=title,
        description=' '.join(description),
        ingredients=ingredients,
        instructions='\n'.join(instructions).strip(),
        nutrition=nutrition,
        equipment=equipment,
        prep_time=metadata.get('prep_time'),
        cook_time=metadata.get('cook_time'),
        servings=metadata.get('servings'),
        course=metadata.get('course') or '',
        cuisine=metadata.get('cuisine') or '',
    )
