"""Slug generation for emoji and group descriptions."""
import re
import unicodedata

# Literal characters spelled out before normalization
SLUGIFY_REPLACEMENT = {'*': 'asterisk', '#': 'number sign'}

COMBINING_MARKS = re.compile(r'[\u0300-\u036f]')
PARENTHESIZED = re.compile(r'\(.+\)')
NON_WORD_RUN = re.compile(r'[\W_]+', re.ASCII)


def slugify(text: str) -> str:
    """
    Return a machine readable short code for a description.

    Examples:
        'flag: St. Kitts & Nevis' -> 'flag_st_kitts_nevis'
        'family: woman, woman, boy, boy' -> 'family_woman_woman_boy_boy'
        'A button (blood type)' -> 'a_button'
        'Cocos (Keeling) Islands' -> 'cocos_islands'
        'keycap *' -> 'keycap_asterisk'

    Only the first occurrence of each replaced character is spelled out.
    """
    for char, replacement in SLUGIFY_REPLACEMENT.items():
        text = text.replace(char, replacement, 1)

    text = COMBINING_MARKS.sub('', unicodedata.normalize('NFD', text))
    text = PARENTHESIZED.sub('', text).strip()
    return NON_WORD_RUN.sub('_', text).lower()
