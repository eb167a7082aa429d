"""
uabrowser.exceptions
~~~~~~~~~~~~~~~~~~~~

The classifier only fails for input it cannot index into. Every other
user agent, however odd, produces a result whose fields may be empty::

    from uabrowser import classify
    from uabrowser.exceptions import MalformedInput

    try:
        identity, mozilla = classify(sections)
    except MalformedInput:
        identity, mozilla = None, None

An empty :class:`~uabrowser.datastructures.BrowserIdentity` means the
browser could not be determined. That is a normal outcome, not an error.
"""
import typing as t


class MalformedInput(ValueError):
    """Raised when the classifier is called with no sections at all. The
    first section is the product token every rule is keyed on, so there
    is nothing to classify without it.
    """

    description = "The user agent did not contain any product sections."

    def __init__(self, description: t.Optional[str] = None) -> None:
        if description is not None:
            self.description = description

        super().__init__(self.description)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description!r}>"
