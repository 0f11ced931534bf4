"""
Environment variable interpolation for config files.
"""

import os
import re
from typing import Mapping, Optional

_PLACEHOLDER = re.compile(r"\$\{(.*?)\}")


def interpolate_env(text: str, variables: Optional[Mapping[str, str]] = None) -> str:
    """
    Replace ``${NAME}`` and ``${NAME:default}`` placeholders in ``text``.

    Unset or empty variables fall back to the default, or to an empty
    string when there is none.

    Examples:
        >>> interpolate_env("url: ${HASURA_URL:http://localhost:8080}", {})
        "url: http://localhost:8080"
    """
    if not text:
        return text
    env = os.environ if variables is None else variables

    def _substitute(match: "re.Match[str]") -> str:
        name, _, default = match.group(1).partition(":")
        value = env.get(name.strip())
        return value if value else default

    return _PLACEHOLDER.sub(_substitute, text)
