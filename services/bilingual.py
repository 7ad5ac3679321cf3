"""
Bilingual Ingestion Service

Turns a draft written in one language into the store's paired _he/_en
fields, translating into the other language.
"""

from dataclasses import replace

from constants import SUPPORTED_LANGUAGES
from .translation import translate


def other_language(lang):
    if lang not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language: {lang!r}")
    return 'en' if lang == 'he' else 'he'


def build_bilingual_record(draft, lang, translate_fn=translate):
    """
    Build recipe fields for both languages from a RecipeDraft.

    Title, description, instructions and ingredient names are translated
    with translate_fn(text, from_lang, to_lang); empty fields are not sent.
    Quantities and units are copied unchanged.

    Raises:
        ValueError: if lang is not a supported language
    """
    target = other_language(lang)

    def _translate(text):
        return translate_fn(text, lang, target) if text else ''

    translated_ingredients = [
        replace(ingredient, name=_translate(ingredient.name))
        for ingredient in draft.ingredients
    ]

    original = {
        'title': draft.title,
        'description': draft.description,
        'instructions': draft.instructions,
        'ingredients': list(draft.ingredients),
    }
    translated = {
        'title': _translate(draft.title),
        'description': _translate(draft.description),
        'instructions': _translate(draft.instructions),
        'ingredients': translated_ingredients,
    }

    record = {}
    for key in original:
        record[f'{key}_{lang}'] = original[key]
        record[f'{key}_{target}'] = translated[key]
    return record
