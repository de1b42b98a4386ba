"""String and array exercises built on conditions and loops."""

from __future__ import annotations

__all__ = [
    "is_brackets_balanced",
    "find_first_single_char",
    "get_digital_root",
    "get_common_directory_path",
]

_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{", ">": "<"}
_OPENING = frozenset(_BRACKET_PAIRS.values())


def is_brackets_balanced(text: str) -> bool:
    """Return True if every bracket in *text* is closed in the right order.

    Recognised pairs are ``[]``, ``()``, ``{}`` and ``<>``.

    Examples:
        ''          -> True
        '[[][][[]]]' -> True
        '[[][]]['   -> False
        '{)'        -> False
        '{<>}[]'    -> True
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif char in _BRACKET_PAIRS:
            if not stack or stack.pop() != _BRACKET_PAIRS[char]:
                return False
    return not stack


def find_first_single_char(text: str) -> str | None:
    """Return the first character that occurs exactly once, or None.

    Examples:
        'The quick brown fox jumps over the lazy dog' -> 'T'
        'abracadabra' -> 'c'
        'entente'     -> None
    """
    counts: dict[str, int] = {}
    for char in text:
        counts[char] = counts.get(char, 0) + 1
    for char in text:
        if counts[char] == 1:
            return char
    return None


def get_digital_root(num: int) -> int:
    """Sum the digits of *num* repeatedly until one digit remains.

    Examples:
        12345  -> 6   (1+2+3+4+5 = 15, 1+5 = 6)
        165536 -> 8
        0      -> 0
    """
    num = abs(num)
    while num > 9:
        total = 0
        while num:
            total += num % 10
            num //= 10
        num = total
    return num


def get_common_directory_path(paths: list[str]) -> str:
    """Return the longest directory prefix shared by all *paths*.

    Examples:
        ['/web/images/image1.png', '/web/images/image2.png'] -> '/web/images/'
        ['/web/assets/style.css', '/web/scripts/app.js', 'home/setting.conf'] -> ''
        ['/web/assets/style.css', '/.bin/mocha', '/read.me'] -> '/'
        ['/web/favicon.ico', '/web-scripts/dump', '/verbalizer/logs'] -> '/'
    """
    if not paths:
        return ""

    prefix_length = 0
    for chars in zip(*paths):
        if any(char != chars[0] for char in chars):
            break
        prefix_length += 1

    prefix = paths[0][:prefix_length]
    cut = prefix.rfind("/")
    return prefix[: cut + 1]
