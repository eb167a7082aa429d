"""
uabrowser
~~~~~~~~~

Determine the browser and rendering engine from a ``User-Agent`` header.

The header is split into its product sections, which are then matched
against the formats the major browsers have sent over the years. Opera
and Presto, Chrome and Safari on WebKit, Gecko based browsers, Edge and
all generations of Internet Explorer are recognized.

:license: BSD-3-Clause
"""
from .browser import BrowserClassifier
from .browser import classify
from .datastructures import BrowserIdentity
from .datastructures import Section
from .exceptions import MalformedInput
from .http import parse_sections
from .useragents import UserAgent

__version__ = "1.0.0"
