"""
uabrowser.browser
~~~~~~~~~~~~~~~~~

Determines the browser and rendering engine from the sections of a user
agent header. There is no single grammar for these headers, so the
classifier applies an ordered set of rules and the first one that
matches decides the result:

1.  Vendor formats keyed on the first section's name, such as Opera's
    ``Opera/9.80 (...) Presto/2.12.388`` or the Windows system services.
2.  The common ``Mozilla/5.0 (...) Engine/version Product/version ...``
    format, where the second section names the engine.
3.  Old Internet Explorer, which only sends a single ``Mozilla`` section
    with ``compatible; MSIE 7.0`` in its remark.

Besides the identity, the classifier reports the declared Mozilla
compatibility version. Some vendors do not send one, in which case it is
an empty string.
"""
import re
import typing as t

from ._internal import _log
from .datastructures import BrowserIdentity
from .datastructures import Section
from .exceptions import MalformedInput

_Result = t.Tuple[BrowserIdentity, str]


class BrowserClassifier:
    """Classify a sequence of :class:`~uabrowser.datastructures.Section`
    into a :class:`~uabrowser.datastructures.BrowserIdentity`. Used by
    :func:`classify` and the :class:`~uabrowser.useragents.UserAgent`.

    The rule tables are class attributes, subclass to change them. Rules
    name a method of the classifier that resolves the matched format.
    """

    #: Formats recognized by the name of the first section. These do not
    #: go through the general engine and product resolution.
    vendor_rules: t.ClassVar[t.Iterable[t.Tuple[str, str]]] = (
        ("Opera", "_opera"),
        ("Chrome", "_chrome"),
        ("WinHttp-Autoproxy-Service", "_winhttp_autoproxy"),
        ("Microsoft-WNS", "_wns"),
        ("Microsoft", "_ncsi"),
    )

    #: Resolvers for the browser of the general format, keyed by the name
    #: of the second section.
    engine_rules: t.ClassVar[t.Iterable[t.Tuple[str, str]]] = (
        ("AppleWebKit", "_webkit"),
        ("Gecko", "_gecko"),
        ("like", "_like_gecko"),
    )

    #: The Trident token is a more accurate version indicator than the
    #: ``MSIE`` token, which reports the compatibility view version.
    trident_versions: t.ClassVar[t.Mapping[str, str]] = {
        "4.0": "8.0",
        "5.0": "9.0",
        "6.0": "10.0",
        "7.0": "11.0",
    }

    _trident_re = re.compile(r"^Trident/([0-9.]+)")
    _rv_re = re.compile(r"^rv:(.+)$")

    def __init__(self) -> None:
        self.vendors = {name: getattr(self, rule) for name, rule in self.vendor_rules}
        self.engines = {name: getattr(self, rule) for name, rule in self.engine_rules}

    def __call__(self, sections: t.Sequence[Section]) -> _Result:
        """Return the browser identity and the Mozilla compatibility
        version for the given sections.

        :param sections: The sections of the user agent, in the order
            they appear in the header.
        :raise MalformedInput: If ``sections`` is empty.
        """
        if not sections:
            raise MalformedInput()

        vendor = self.vendors.get(sections[0].name)

        if vendor is not None:
            _log("debug", "Resolving %r as a vendor format.", sections[0].name)
            return vendor(sections)

        return self._resolve(sections), sections[0].version

    def _opera(self, sections: t.Sequence[Section]) -> _Result:
        engine_version = sections[1].version if len(sections) > 1 else ""
        identity = BrowserIdentity(
            "Presto", engine_version, "Opera", sections[0].version
        )
        return identity, ""

    def _chrome(self, sections: t.Sequence[Section]) -> _Result:
        # Chrome without a Mozilla token always implies Mozilla/5.0. The
        # version is found in the name slot of the third section.
        if len(sections) > 2:
            identity = BrowserIdentity("AppleWebKit", "", "Chrome", sections[2].name)
            return identity, "5.0"

        return BrowserIdentity(browser_name="Chrome"), "5.0"

    def _winhttp_autoproxy(self, sections: t.Sequence[Section]) -> _Result:
        identity = BrowserIdentity(
            browser_name="WinHttpAutoproxyService", browser_version=sections[0].version
        )
        return identity, ""

    def _wns(self, sections: t.Sequence[Section]) -> _Result:
        return BrowserIdentity(browser_name="WNS"), ""

    def _ncsi(self, sections: t.Sequence[Section]) -> _Result:
        if len(sections) > 1 and sections[1].name == "NCSI":
            return BrowserIdentity(browser_name="NCSI"), ""

        return BrowserIdentity(), ""

    def _resolve(self, sections: t.Sequence[Section]) -> BrowserIdentity:
        if len(sections) == 1:
            return self._legacy_msie(sections[0])

        engine = sections[1]

        if len(sections) == 2:
            return BrowserIdentity(engine.name, engine.version)

        resolver = self.engines.get(engine.name)

        if resolver is not None:
            return resolver(sections)

        _log("debug", "Unrecognized engine %r.", engine.name)
        return BrowserIdentity(engine.name, engine.version, "", sections[2].version)

    def _webkit(self, sections: t.Sequence[Section]) -> BrowserIdentity:
        engine, product, last = sections[1], sections[2], sections[-1]

        if last.name == "Edge":
            # Edge does not report a WebKit derived engine version.
            return BrowserIdentity("EdgeHTML", "", "Edge", last.version)

        if last.name == "OPR":
            return BrowserIdentity(engine.name, engine.version, "Opera", last.version)

        name = "Chrome" if product.name == "Chrome" else "Safari"
        return BrowserIdentity(engine.name, engine.version, name, product.version)

    def _gecko(self, sections: t.Sequence[Section]) -> BrowserIdentity:
        engine, product = sections[1], sections[2]

        # The Mail.Ru agent wraps the real product, which follows it.
        if product.name == "MRA" and len(sections) > 4:
            product = sections[4]

        return BrowserIdentity(
            engine.name, engine.version, product.name, product.version
        )

    def _like_gecko(self, sections: t.Sequence[Section]) -> BrowserIdentity:
        engine, product = sections[1], sections[2]

        if product.name != "Gecko":
            return BrowserIdentity(engine.name, engine.version, "", product.version)

        # Internet Explorer 11: "Mozilla/5.0 (...; Trident/7.0; rv:11.0) like Gecko"
        comment = sections[0].comment
        engine_version = engine.version
        browser_version = ""

        for token in comment:
            match = self._trident_re.match(token)

            if match is not None:
                engine_version = match.group(1)
                break

        for token in comment:
            match = self._rv_re.match(token)

            if match is not None:
                browser_version = match.group(1)
                break

        return BrowserIdentity(
            "Trident", engine_version, "Internet Explorer", browser_version
        )

    def _legacy_msie(self, section: Section) -> BrowserIdentity:
        comment = section.comment

        if (
            len(comment) < 2
            or comment[0] != "compatible"
            or not comment[1].startswith(("MSIE", "IE"))
        ):
            _log("debug", "Unrecognized single section user agent %r.", section.name)
            return BrowserIdentity()

        engine_version = ""
        browser_version = ""

        for token in comment:
            if token.startswith("Trident/"):
                engine_version = token[8:]
                browser_version = self.trident_versions.get(engine_version, "")
                break

        # Without a known Trident token, fall back to the MSIE token.
        if not browser_version:
            browser_version = comment[1][4:].strip()

        return BrowserIdentity(
            "Trident", engine_version, "Internet Explorer", browser_version
        )


_classifier = BrowserClassifier()


def classify(sections: t.Sequence[Section]) -> _Result:
    """Classify the sections of a user agent with the default
    :class:`BrowserClassifier`.

    .. code-block:: python

        identity, mozilla = classify(parse_sections(header))

    :param sections: The sections of the user agent, in header order.
    :return: A ``(identity, mozilla)`` tuple. ``mozilla`` is the
        declared Mozilla compatibility version, or an empty string.
    :raise MalformedInput: If ``sections`` is empty.
    """
    return _classifier(sections)
