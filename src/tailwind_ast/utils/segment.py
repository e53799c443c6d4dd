"""Bracket-aware string splitting."""

from typing import List

_CLOSING = {'(': ')', '[': ']', '{': '}'}


def segment(value: str, separator: str) -> List[str]:
    """Split ``value`` on ``separator`` where it is not nested.

    Separators inside ``()``, ``[]``, ``{}`` or quotes are kept, and a
    backslash escapes the character after it.

    >>> segment("hover:bg-[url(a:b)]", ":")
    ['hover', 'bg-[url(a:b)]']
    """
    stack: List[str] = []
    parts: List[str] = []
    last = 0
    idx = 0
    length = len(value)

    while idx < length:
        char = value[idx]

        if not stack and char == separator:
            parts.append(value[last:idx])
            last = idx + 1
        elif char == '\\':
            idx += 1
        elif char in ('"', "'"):
            idx += 1
            while idx < length and value[idx] != char:
                if value[idx] == '\\':
                    idx += 1
                idx += 1
        elif char in _CLOSING:
            stack.append(_CLOSING[char])
        elif stack and char == stack[-1]:
            stack.pop()

        idx += 1

    parts.append(value[last:])
    return parts
