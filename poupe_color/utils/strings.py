import re

_UPPER_RUN = re.compile(r'([A-Z]+)([A-Z][a-z])')
_CAMEL = re.compile(r'([a-z\d])([A-Z])')
_SEPARATORS = re.compile(r'[\s_]+')


def kebab_case(s: str) -> str:
    """
    Convert an identifier to kebab-case.

    >>> kebab_case('brandColor')
    'brand-color'
    >>> kebab_case('XMLHttpRequest')
    'xml-http-request'
    >>> kebab_case('neutral_variant')
    'neutral-variant'
    """
    s = _UPPER_RUN.sub(r'\1-\2', s)
    s = _CAMEL.sub(r'\1-\2', s)
    s = _SEPARATORS.sub('-', s)
    return s.lower()
