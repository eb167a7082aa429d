import typing as t


class Section(t.NamedTuple):
    """One product token of a user agent header, such as
    ``AppleWebKit/537.36 (KHTML, like Gecko)``.

    Sections are ordered as they appear in the header and the position
    matters: the first one is the primary (usually ``Mozilla``) token,
    the second is typically the rendering engine.
    """

    #: The product identifier, ``"AppleWebKit"``.
    name: str = ""
    #: The product version, ``"537.36"``. May be empty.
    version: str = ""
    #: The tokens of the parenthesized remark, ``("KHTML", "like Gecko")``.
    comment: t.Tuple[str, ...] = ()


class BrowserIdentity(t.NamedTuple):
    """The browser and rendering engine determined from a user agent.
    Fields that could not be determined are empty strings.
    """

    engine_name: str = ""
    engine_version: str = ""
    browser_name: str = ""
    browser_version: str = ""

    def engine(self) -> t.Tuple[str, str]:
        """The engine name and version, ``("Gecko", "20100101")``."""
        return self.engine_name, self.engine_version

    def browser(self) -> t.Tuple[str, str]:
        """The browser name and version, ``("Firefox", "68.0")``."""
        return self.browser_name, self.browser_version

    def __bool__(self) -> bool:
        return bool(self.browser_name)
