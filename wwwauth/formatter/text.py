"""
Text Formatter for wwwauth.
"""

from html.parser import HTMLParser
import re
import textwrap
from typing import Any, List, Optional

from wwwauth.formatter import Formatter
from wwwauth.headers import HttpHeader
from wwwauth.speak import Note, levels, categories

NL = "\n"


class BaseTextFormatter(Formatter):
    """
    Base class for text formatters."""

    media_type = "text/plain"

    note_categories = [
        categories.GENERAL,
        categories.SECURITY,
        categories.CHALLENGE,
    ]

    error_template = "Error: %s\n"

    def __init__(self, *args: Any) -> None:
        Formatter.__init__(self, *args)
        self.verbose = False

    def start_output(self) -> None:
        pass

    def finish_output(self) -> None:
        "Write out each header, its attributes and the notes about it."
        offset = 0
        for header in self.message.parsed_headers:
            offset += 1
            self.output(self.format_header(header) + NL)
            self.output(self.format_recommendations(f"offset-{offset}") + NL)
        if self.config.getboolean("combine", fallback=False):
            self.output(self.format_combined() + NL)

    def error_output(self, message: str) -> None:
        self.output(self.error_template % message)

    def format_header(self, header: HttpHeader) -> str:
        out = [self.colorize(None, header.to_string())]
        for name, value in header.attributes(seen_only=True).items():
            out.append(f"    {name}: {'(no value)' if value is None else value}")
        return NL.join(out)

    def format_combined(self) -> str:
        sep = "=" * 78
        return NL.join([sep, self.message.to_string(), sep])

    def format_recommendations(self, subject: str) -> str:
        return "".join(
            [
                self.format_recommendation(subject, category)
                for category in self.note_categories
            ]
        )

    def format_recommendation(self, subject: str, category: categories) -> str:
        notes = [
            note
            for note in self.message.notes
            if note.subject == subject and note.category == category
        ]
        if not notes:
            return ""
        out = [f"* {category.value}:"]
        for note in notes:
            out.append(f"  * {self.colorize(note.level, note.show_summary().unescape())}")
            if self.verbose:
                out.append("")
                out.extend("    " + line for line in self.format_text(note))
                out.append("")
        out.append(NL)
        return NL.join(out)

    @staticmethod
    def format_text(note: Note) -> List[str]:
        return textwrap.wrap(strip_tags(re.sub(r"(?m)\s\s+", " ", note.show_text())))

    def colorize(self, level: Optional[levels], instr: str) -> str:
        if self.kw.get("tty_out", False):
            color_end = "\033[0;39m"
            if level == levels.GOOD:
                color_start = "\033[1;32m"
            elif level == levels.BAD:
                color_start = "\033[1;31m"
            elif level == levels.WARN:
                color_start = "\033[1;33m"
            elif level == levels.INFO:
                color_start = "\033[1;34m"
            else:
                color_start = "\033[0;32m"
            return color_start + instr + color_end
        return instr


class TextFormatter(BaseTextFormatter):
    """
    Format a HeaderMessage as text.
    """

    name = "text"


class VerboseTextFormatter(TextFormatter):
    name = "txt_verbose"

    def __init__(self, *args: Any) -> None:
        TextFormatter.__init__(self, *args)
        self.verbose = True


class MLStripper(HTMLParser):
    def __init__(self) -> None:
        HTMLParser.__init__(self)
        self.reset()
        self.fed: List[str] = []

    def handle_data(self, data: str) -> None:
        self.fed.append(data)

    def get_data(self) -> str:
        return "".join(self.fed)


def strip_tags(html: str) -> str:
    stripper = MLStripper()
    stripper.feed(html)
    return stripper.get_data()
