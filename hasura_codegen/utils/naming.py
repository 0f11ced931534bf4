"""
Name case conversion helpers.

Hasura exposes tables under their snake_case names by default and under
camelCase names when the ``graphql-default`` naming convention is enabled,
so type lookups need both forms of the same logical name.
"""

import re
from typing import List

_CAPITAL_RUN = re.compile(r"[A-Z]+")
_WORD_BOUNDARY = re.compile(r"(?=[A-Z])|[.\-\s_]")


def split_words(value: str) -> List[str]:
    """
    Split an identifier into lowercase words.

    Runs of capitals count as a single word, so ``HTTPServer`` stays one
    word (``httpserver``) instead of being split letter by letter.

    Examples:
        >>> split_words("userProfile")
        ["user", "profile"]
        >>> split_words("user_profile-item")
        ["user", "profile", "item"]
    """
    if not value:
        return []
    capitalized = _CAPITAL_RUN.sub(lambda match: match.group(0).capitalize(), value)
    return [part.lower() for part in _WORD_BOUNDARY.split(capitalized) if part]


def to_snake_case(value: str) -> str:
    """
    Convert an identifier to lowercase_with_underscores.

    Examples:
        >>> to_snake_case("UserProfile")
        "user_profile"
        >>> to_snake_case("user_profile")
        "user_profile"
    """
    return "_".join(split_words(value))


def to_camel_case(value: str) -> str:
    """
    Convert an identifier to camelCase.

    Examples:
        >>> to_camel_case("user_profile_insert_input")
        "userProfileInsertInput"
        >>> to_camel_case("users")
        "users"
    """
    words = split_words(value)
    if not words:
        return ""
    return words[0] + "".join(word[:1].upper() + word[1:] for word in words[1:])
