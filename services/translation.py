"""
Translation Service

Thin client for the public Google translate endpoint. Translation is
best-effort: on any failure the original text is returned.
"""

import logging

import requests

log = logging.getLogger(__name__)

DEFAULT_TRANSLATE_URL = 'https://translate.googleapis.com/translate_a/single'
DEFAULT_TIMEOUT = 10


class TranslationError(Exception):
    """Raised when the translation endpoint fails or returns an unexpected payload."""
    pass


def fetch_translation(text, from_lang, to_lang, url=DEFAULT_TRANSLATE_URL, timeout=DEFAULT_TIMEOUT):
    """
    Call the endpoint and join the translated segments.

    Raises:
        TranslationError: network/HTTP errors or a malformed response
    """
    params = {'client': 'gtx', 'sl': from_lang, 'tl': to_lang, 'dt': 't', 'q': text}
    try:
        response = requests.get(url, params=params, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        raise TranslationError(f"Translation request failed: {e}") from e
    except ValueError as e:
        raise TranslationError("Translation response is not JSON") from e

    try:
        return ''.join(segment[0] for segment in data[0] if segment and segment[0])
    except (IndexError, KeyError, TypeError) as e:
        raise TranslationError("Unexpected translation payload") from e


def translate(text, from_lang, to_lang, url=DEFAULT_TRANSLATE_URL, timeout=DEFAULT_TIMEOUT):
    """Translate text, falling back to the original text on failure."""
    if not text or not text.strip() or from_lang == to_lang:
        return text
    try:
        translated = fetch_translation(text, from_lang, to_lang, url=url, timeout=timeout)
    except TranslationError as e:
        log.warning("%s; keeping original text", e)
        return text
    return translated or text
