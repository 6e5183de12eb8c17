"""Shell-glob matching of release asset names.

Asset names are flat file names, so the glob has no path-separator rules:

- ``*`` matches any run of characters, including none
- ``?`` matches exactly one character
- ``[...]`` matches one character from a class; ``a-z`` ranges are allowed
  and a leading ``!`` or ``^`` negates the class. A ``]`` right after the
  opening bracket is taken literally.
- ``\\`` escapes the next character

This is more permissive than Go-style ``path.Match`` on purpose: ``!`` negates,
``[]a]`` and ``[a-]`` are valid classes with a literal ``]`` or ``-``.

Matching is case-sensitive.
"""

import re
from collections.abc import Sequence

from ghdownload.core.errors import InvalidPatternError
from ghdownload.models.release import Asset

MATCH_ALL = "*"


def _invalid(pattern: str, reason: str) -> InvalidPatternError:
    return InvalidPatternError(f"invalid pattern '{pattern}': {reason}")


def _parse_class(pattern: str, start: int) -> tuple[str, int]:
    """Translate the character class opening at ``start`` (just past ``[``).

    Returns the regex class and the index just past the closing ``]``.
    """
    i = start
    n = len(pattern)
    negate = False
    if i < n and pattern[i] in "!^":
        negate = True
        i += 1

    items: list[str] = []
    while True:
        if i >= n:
            raise _invalid(pattern, "unterminated character class")
        char = pattern[i]
        if char == "]" and items:
            i += 1
            break
        if char == "\\":
            i += 1
            if i >= n:
                raise _invalid(pattern, "unterminated character class")
            char = pattern[i]
        i += 1

        if i + 1 < n and pattern[i] == "-" and pattern[i + 1] != "]":
            high = pattern[i + 1]
            i += 2
            if high == "\\":
                if i >= n:
                    raise _invalid(pattern, "unterminated character class")
                high = pattern[i]
                i += 1
            if high < char:
                raise _invalid(pattern, f"bad range '{char}-{high}'")
            items.append(f"{re.escape(char)}-{re.escape(high)}")
        else:
            items.append(re.escape(char))

    return ("[^" if negate else "[") + "".join(items) + "]", i


def compile_pattern(pattern: str) -> re.Pattern:
    """Compile a glob into a regex that must match the whole name.

    Raises:
        InvalidPatternError: If the glob is malformed
    """
    parts: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        i += 1
        if char == "*":
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif char == "?":
            parts.append(".")
        elif char == "\\":
            if i >= n:
                raise _invalid(pattern, "trailing backslash")
            parts.append(re.escape(pattern[i]))
            i += 1
        elif char == "[":
            cls, i = _parse_class(pattern, i)
            parts.append(cls)
        else:
            parts.append(re.escape(char))

    return re.compile("".join(parts), re.DOTALL)


def filter_assets(assets: Sequence[Asset], pattern: str) -> list[Asset]:
    """Return the assets whose names match ``pattern``, in their original order.

    ``*`` and the empty string match everything without evaluating a glob.
    With no assets there is nothing to match, so the pattern is not checked.
    """
    if pattern in (MATCH_ALL, "") or not assets:
        return list(assets)

    regex = compile_pattern(pattern)
    return [asset for asset in assets if regex.fullmatch(asset.name)]
