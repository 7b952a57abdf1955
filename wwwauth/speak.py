"""
A collection of notes that wwwauth can emit.

PLEASE NOTE: the summary field is automatically HTML escaped, so it can contain arbitrary text (as
long as it's unicode).

However, the longer text field IS NOT ESCAPED, and therefore all variables to be interpolated into
it need to be escaped to be safe for use in HTML.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from markdown import markdown
from markupsafe import Markup, escape


class categories(Enum):
    "Note classifications."
    GENERAL = "General"
    SECURITY = "Security"
    CHALLENGE = "Challenge"


class levels(Enum):
    "Note levels."
    GOOD = "good"
    WARN = "warning"
    BAD = "bad"
    INFO = "info"


class Note:
    """
    A note about a header line, or about one of the parameters in it.
    """

    category: categories = None
    level: levels = None
    summary = ""
    text = ""

    def __init__(
        self, subject: str, vrs: Optional[Dict[str, Union[str, int]]] = None
    ) -> None:
        self.subject = subject
        self.vars = vrs or {}

    def __eq__(self, other: Any) -> bool:
        return bool(
            self.__class__ == other.__class__
            and self.vars == other.vars
            and self.subject == other.subject
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.subject} {self.vars!r}>"

    def show_summary(self) -> Markup:
        """
        Output a textual summary of the message as a Unicode string.

        Interpolated variables are HTML-escaped.
        """
        return Markup(self.summary) % self.vars

    def show_text(self) -> Markup:
        """
        Show the HTML text for the message as a Unicode string.

        The resulting string is already HTML-encoded.
        """
        return Markup(
            markdown(
                self.text % {k: escape(str(v)) for k, v in self.vars.items()},
                output_format="html",
            )
        )
