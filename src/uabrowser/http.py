import re
import typing as t

from .datastructures import Section

_comment_split_re = re.compile(r"[;,]")
_closing = {")": "(", "]": "["}


def _read_until(value: str, pos: int, delimiter: str) -> t.Tuple[str, int]:
    """Read from ``pos`` up to the next unnested ``delimiter``. Returns
    the text read and the position after the delimiter. An unterminated
    value reads to the end of the string.
    """
    opening = _closing.get(delimiter)
    depth = 0
    start = pos

    while pos < len(value):
        char = value[pos]

        if char == delimiter:
            if depth == 0:
                return value[start:pos], pos + 1

            depth -= 1
        elif char == opening:
            depth += 1

        pos += 1

    return value[start:], pos


def _skip_space(value: str, pos: int) -> int:
    while pos < len(value) and value[pos].isspace():
        pos += 1

    return pos


def parse_comment(value: str) -> t.Tuple[str, ...]:
    """Split the inside of a parenthesized user agent remark into its
    tokens. Empty tokens are dropped.

    >>> parse_comment("Windows NT 10.0; WOW64; Trident/7.0; rv:11.0")
    ('Windows NT 10.0', 'WOW64', 'Trident/7.0', 'rv:11.0')

    :param value: The remark without the surrounding parentheses.
    """
    return tuple(
        item.strip() for item in _comment_split_re.split(value) if item.strip()
    )


def parse_sections(value: str) -> t.List[Section]:
    """Split a ``User-Agent`` header value into its product sections.

    Each product is a ``name/version`` token, the version is optional. A
    parenthesized remark following a product is attached to it as its
    comment. Trailing data in square brackets, like the ``[en]`` some old
    browsers send, is discarded.

    >>> [s.name for s in parse_sections("Mozilla/5.0 (Windows NT 6.3) like Gecko")]
    ['Mozilla', 'like', 'Gecko']

    :param value: The header value.
    :return: The sections in header order. Empty if the value is blank.
    """
    sections = []
    pos = _skip_space(value, 0)

    while pos < len(value):
        name = version = ""
        comment: t.Tuple[str, ...] = ()

        if value[pos] not in "([":
            start = pos

            while pos < len(value) and not value[pos].isspace() and value[pos] != "(":
                pos += 1

            name, _, version = value[start:pos].partition("/")
            pos = _skip_space(value, pos)

        if pos < len(value) and value[pos] == "(":
            remark, pos = _read_until(value, pos + 1, ")")
            comment = parse_comment(remark)
            pos = _skip_space(value, pos)

        if pos < len(value) and value[pos] == "[":
            _, pos = _read_until(value, pos + 1, "]")
            pos = _skip_space(value, pos)

        if name or version or comment:
            sections.append(Section(name, version, comment))

    return sections
