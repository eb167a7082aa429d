import pytest

from uabrowser import http
from uabrowser.datastructures import Section


@pytest.mark.parametrize(
    ("value", "expect"),
    (
        ("", []),
        ("   ", []),
        ("curl/7.64.1", [Section("curl", "7.64.1")]),
        ("Microsoft NCSI", [Section("Microsoft"), Section("NCSI")]),
        (
            "Mozilla/5.0 (Windows NT 10.0; WOW64; Trident/7.0; rv:11.0) like Gecko",
            [
                Section(
                    "Mozilla",
                    "5.0",
                    ("Windows NT 10.0", "WOW64", "Trident/7.0", "rv:11.0"),
                ),
                Section("like"),
                Section("Gecko"),
            ],
        ),
        (
            "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko)"
            " Chrome/58.0.3029.110 Safari/537.36",
            [
                Section("Mozilla", "5.0", ("X11", "Linux x86_64")),
                Section("AppleWebKit", "537.36", ("KHTML", "like Gecko")),
                Section("Chrome", "58.0.3029.110"),
                Section("Safari", "537.36"),
            ],
        ),
        (
            "Opera/7.54 (Windows NT 5.1; U)  [pl] Presto/1.0",
            [
                Section("Opera", "7.54", ("Windows NT 5.1", "U")),
                Section("Presto", "1.0"),
            ],
        ),
        ("Foo/1.0(bar; baz)", [Section("Foo", "1.0", ("bar", "baz"))]),
        ("Mozilla/5.0 (Windows", [Section("Mozilla", "5.0", ("Windows",))]),
        ("(compatible) Foo", [Section("", "", ("compatible",)), Section("Foo")]),
        ("Foo/1.0 (;; ) Bar", [Section("Foo", "1.0"), Section("Bar")]),
        ("Foo/1.0/beta", [Section("Foo", "1.0/beta")]),
    ),
)
def test_parse_sections(value, expect):
    assert http.parse_sections(value) == expect


def test_parse_sections_nested_comment():
    sections = http.parse_sections("Foo/1.0 (a (b) c; d) Bar/2.0")
    assert [s.name for s in sections] == ["Foo", "Bar"]
    assert sections[0].comment == ("a (b) c", "d")


def test_parse_comment():
    assert http.parse_comment("compatible; MSIE 7.0, Windows NT 6.0") == (
        "compatible",
        "MSIE 7.0",
        "Windows NT 6.0",
    )
    assert http.parse_comment(" ; ") == ()
