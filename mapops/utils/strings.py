"""String helpers used by the key operations."""


def starts_with(s: str, prefix: str) -> bool:
    """Return True if ``s`` begins with ``prefix`` at position 0.

    Examples:
        >>> starts_with("style:color", "style:")
        True
        >>> starts_with("color", "style:")
        False
    """
    return s.startswith(prefix)


def replace_substr(s: str, target: str, replacement: str) -> str:
    """Replace every non-overlapping occurrence of ``target`` in ``s``.

    Occurrences are found left to right. An empty ``target`` matches
    nothing and ``s`` is returned unchanged.

    Examples:
        >>> replace_substr("style:a-style:b", "style:", "")
        'a-b'
        >>> replace_substr("aaa", "aa", "b")
        'ba'
    """
    if not target:
        return s
    return s.replace(target, replacement)
