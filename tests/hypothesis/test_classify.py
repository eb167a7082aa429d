import hypothesis
from hypothesis.strategies import builds
from hypothesis.strategies import lists
from hypothesis.strategies import one_of
from hypothesis.strategies import sampled_from
from hypothesis.strategies import text

from uabrowser import browser
from uabrowser import http
from uabrowser import useragents
from uabrowser.datastructures import BrowserIdentity
from uabrowser.datastructures import Section

_names = one_of(
    sampled_from(
        [
            "Mozilla",
            "Opera",
            "Chrome",
            "WinHttp-Autoproxy-Service",
            "Microsoft-WNS",
            "Microsoft",
            "NCSI",
            "AppleWebKit",
            "Gecko",
            "like",
            "Edge",
            "OPR",
            "MRA",
            "Safari",
        ]
    ),
    text(),
)
_comments = lists(
    one_of(
        sampled_from(["compatible", "MSIE 7.0", "IE", "Trident/4.0", "rv:11.0"]),
        text(),
    )
).map(tuple)
_sections = lists(builds(Section, _names, text(), _comments), min_size=1)


@hypothesis.given(_sections)
def test_classify_total_and_deterministic(sections):
    identity, mozilla = browser.classify(sections)

    assert isinstance(identity, BrowserIdentity)
    assert isinstance(mozilla, str)
    assert browser.classify(list(sections)) == (identity, mozilla)


@hypothesis.given(text())
def test_parse_sections(value):
    for section in http.parse_sections(value):
        assert not any(c.isspace() for c in section.name + section.version)
        assert all(token and token == token.strip() for token in section.comment)


@hypothesis.given(text())
def test_user_agent(value):
    ua = useragents.UserAgent(value)

    assert str(ua) == value
    assert bool(ua) == bool(ua.browser()[0])
