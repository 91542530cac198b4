"""
Locale parsing and locale-aware value lookup.

Only the primary language tag and the first subtag of a locale are
significant; further subtags are ignored.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, TypeVar

from helpkit.core.logging import i18n_logger
from helpkit.core.models import ParsedLocale
from helpkit.utils.strings import equals_ignoring_case

T = TypeVar("T")


def parse_locale(locale: str) -> ParsedLocale:
    """
    Extract the primary language tag and the first subtag of ``locale``.

    Follows the IETF language tag layout (``language[-subtag...]``). Never
    fails: a locale without a hyphen has no subtag.

    Examples:
        >>> parse_locale("en")
        ParsedLocale(language_tag='en', sub_tag=None)
        >>> parse_locale("zh-Hant-HK")
        ParsedLocale(language_tag='zh', sub_tag='Hant')
    """
    segments = locale.split("-")
    sub_tag = segments[1] if len(segments) > 1 else None
    return ParsedLocale(language_tag=segments[0], sub_tag=sub_tag)


def get_localized_value(
    values: Mapping[str, T],
    locale: str,
    fallback_locales: Sequence[str] = (),
) -> Optional[T]:
    """
    Find the value for ``locale``, falling back to more general locales.

    An exact, case-sensitive key is returned straight away. Otherwise the
    candidates ``locale``, its bare language tag (only when it has a subtag)
    and then ``fallback_locales`` are tried in that order, each compared
    case-insensitively against every key.

    Args:
        values: Mapping of locale tag to value
        locale: Requested locale, e.g. ``"en-GB"``
        fallback_locales: Locales to try, in order, after the requested one

    Returns:
        The matching value, or None when no candidate matches any key

    Example:
        >>> greetings = {"en": "Hello", "en-US": "Howdy", "fr": "Bonjour"}
        >>> get_localized_value(greetings, "en-GB")
        'Hello'
        >>> get_localized_value(greetings, "de", ["fr"])
        'Bonjour'
    """
    # Fast case-sensitive lookup
    if locale in values:
        return values[locale]

    parsed = parse_locale(locale)
    if parsed.sub_tag:
        candidates = [locale, parsed.language_tag, *fallback_locales]
    else:
        candidates = [locale, *fallback_locales]

    for candidate in candidates:
        lower_candidate = candidate.lower()
        for key in values:
            if equals_ignoring_case(key, lower_candidate):
                i18n_logger.debug(
                    "Resolved localized value", locale=locale, candidate=candidate, key=key
                )
                return values[key]

    i18n_logger.debug("No localized value found", locale=locale, candidates=candidates)
    return None
