"""
Input Sanitization Module

Cleans user input before it is stored. The API returns JSON and the browser
escapes on render, so text is stored unescaped: control characters are
removed and lengths are capped.
"""

import math
import re
from urllib.parse import urlparse

from constants import MAX_LENGTHS, MIN_RATING, MAX_RATING

# Control characters except tab and newline
_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize a single-line text field.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Cleaned string with whitespace collapsed, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = _CONTROL_CHARS.sub('', text)
    text = re.sub(r'\s+', ' ', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_multiline(text, max_length=MAX_LENGTHS['instructions']):
    """Like sanitize_text, but keeps line breaks (instructions, pasted recipes)."""
    if not text:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = text.replace('\r\n', '\n').replace('\r', '\n')
    text = _CONTROL_CHARS.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_url(url):
    """
    Sanitize an image URL by rejecting dangerous schemes.

    Accepts http(s) URLs and site-relative paths such as /uploads/x.jpg.

    Returns:
        The URL if safe, empty string if unsafe or invalid
    """
    if not url or not isinstance(url, str):
        return ''

    url = url.strip()
    if len(url) > MAX_LENGTHS['image_url']:
        return ''

    try:
        parsed = urlparse(url)
    except ValueError:
        return ''

    scheme = parsed.scheme.lower()
    if scheme in ('http', 'https'):
        return url if parsed.netloc else ''
    if not scheme and url.startswith('/') and not url.startswith('//'):
        return url
    return ''


def sanitize_rating(value, tried):
    """Rating is kept only for tried recipes and clamped to the allowed range."""
    if not tried or value is None or value == '':
        return None
    try:
        rating = float(value)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(rating):
        return None
    return max(MIN_RATING, min(MAX_RATING, rating))
