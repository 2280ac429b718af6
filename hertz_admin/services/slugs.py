"""
Slug Generation

Turns article titles (Russian or Latin) into URL-safe slugs.
"""

import re
import unicodedata

# GOST 7.79-2000 (system B), simplified for URLs
CYRILLIC_TO_LATIN = {
    'а': 'a', 'б': 'b', 'в': 'v', 'г': 'g', 'д': 'd', 'е': 'e', 'ё': 'yo',
    'ж': 'zh', 'з': 'z', 'и': 'i', 'й': 'y', 'к': 'k', 'л': 'l', 'м': 'm',
    'н': 'n', 'о': 'o', 'п': 'p', 'р': 'r', 'с': 's', 'т': 't', 'у': 'u',
    'ф': 'f', 'х': 'h', 'ц': 'ts', 'ч': 'ch', 'ш': 'sh', 'щ': 'sch',
    'ъ': '', 'ы': 'y', 'ь': '', 'э': 'e', 'ю': 'yu', 'я': 'ya',
}

MAX_SLUG_LENGTH = 80
DEFAULT_SLUG = 'article'


def slugify(title):
    """Convert a title into a lowercase, hyphen-separated slug.

    Cyrillic letters are transliterated, other accented letters are reduced
    to their ASCII base, and anything else becomes a single hyphen.
    """
    text = ''.join(CYRILLIC_TO_LATIN.get(ch, ch) for ch in (title or '').lower())
    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    text = re.sub(r'[^a-z0-9]+', '-', text).strip('-')
    text = text[:MAX_SLUG_LENGTH].rstrip('-')
    return text or DEFAULT_SLUG


def unique_slug(title, exists):
    """Slugify ``title`` and append ``-2``, ``-3``... until ``exists(slug)`` is False.

    ``exists`` is a callable checking the store, e.g.
    ``lambda s: storage.get_article_by_slug(s) is not None``.
    """
    base = slugify(title)
    slug = base
    suffix = 2
    while exists(slug):
        slug = f'{base}-{suffix}'
        suffix += 1
    return slug
