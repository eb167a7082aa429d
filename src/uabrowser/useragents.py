import typing as t

from ._internal import _log
from .browser import BrowserClassifier
from .datastructures import BrowserIdentity
from .http import parse_sections


class UserAgent:
    """Represents a user agent. Pass it the value of a ``User-Agent``
    header and inspect the browser and engine that sent it.

    .. code-block:: python

        >>> ua = UserAgent("Opera/9.80 (Windows NT 6.1) Presto/2.12.388")
        >>> ua.browser()
        ('Opera', '9.80')
        >>> ua.engine()
        ('Presto', '2.12.388')

    The following attributes exist:

    .. attribute:: string

       the raw user agent string

    .. attribute:: identity

       the :class:`~uabrowser.datastructures.BrowserIdentity`. All of its
       fields are empty if the browser was not recognized.

    .. attribute:: mozilla

       the declared Mozilla compatibility version, such as ``"5.0"``.
       Empty for browsers that do not claim to be Mozilla compatible.
    """

    #: The classifier used to resolve the parsed sections. Set it to an
    #: instance of a :class:`~uabrowser.browser.BrowserClassifier`
    #: subclass to change the rules.
    classifier: t.ClassVar[BrowserClassifier] = BrowserClassifier()

    def __init__(self, string: str) -> None:
        self.string = string
        sections = parse_sections(string)

        if sections:
            self.identity, self.mozilla = self.classifier(sections)
        else:
            _log("debug", "Empty user agent %r.", string)
            self.identity, self.mozilla = BrowserIdentity(), ""

    def engine(self) -> t.Tuple[str, str]:
        """The name and version of the rendering engine."""
        return self.identity.engine()

    def browser(self) -> t.Tuple[str, str]:
        """The name and version of the browser."""
        return self.identity.browser()

    def to_header(self) -> str:
        return self.string

    def __str__(self) -> str:
        return self.string

    def __bool__(self) -> bool:
        return bool(self.identity)

    def __repr__(self) -> str:
        name, version = self.browser()
        return f"<{type(self).__name__} {name!r}/{version}>"
