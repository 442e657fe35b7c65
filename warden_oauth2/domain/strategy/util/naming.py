"""Provider keyword normalization.

A provider keyword (``twitter``, ``my_service``) is turned into two stable
names: the canonical strategy name used by the type registry and the dispatch
key the authentication pipeline looks strategies up by.
"""

import re

from warden_oauth2.domain.shared.error import UnresolvableIdentifierError

DISPATCH_KEY_SUFFIX = "_oauth2"

_TOKEN_START = re.compile(r"(?:^|_)(.)")


def camelize(word: str) -> str:
    """Upper-case the first letter of every underscore separated token.

    >>> camelize("my_service")
    'MyService'
    >>> camelize("gitHub")
    'GitHub'
    """
    return _TOKEN_START.sub(lambda match: match.group(1).upper(), word)


def normalize(keyword: str) -> str:
    """Return the canonical strategy name for a provider keyword.

    Raises:
        UnresolvableIdentifierError: If the keyword is empty or does not
            camelize into a valid Python identifier.
    """
    text = str(keyword)
    if not text:
        raise UnresolvableIdentifierError(keyword)

    name = camelize(text)
    if not name.isidentifier():
        raise UnresolvableIdentifierError(keyword)
    return name


def dispatch_key(keyword: str) -> str:
    """Return the key a provider's strategy is registered under, e.g. ``twitter_oauth2``."""
    text = str(keyword)
    if not text:
        raise UnresolvableIdentifierError(keyword)
    return f"{text}{DISPATCH_KEY_SUFFIX}"
