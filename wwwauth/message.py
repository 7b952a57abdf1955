"""
A set of header lines, with their parsed values and notes.
"""

from typing import List, Type, Union

from wwwauth.headers import HeaderProcessor, HttpHeader, InvalidFormatError
from wwwauth.speak import Note
from wwwauth.type import StrHeaderListType


class HeaderMessage:
    """
    Header lines from one message, as they're processed.
    """

    def __init__(self) -> None:
        self.headers: StrHeaderListType = []
        self.parsed_headers: List[HttpHeader] = []
        self.notes: List[Note] = []
        self.note_classes: List[str] = []

    def __repr__(self) -> str:
        return f"<{self.__class__.__module__}.{self.__class__.__name__} at {id(self):#x}>"

    def add_note(self, subject: str, note: Type[Note], **kw: Union[str, int]) -> None:
        "Record a note about subject."
        self.notes.append(note(subject, kw))
        self.note_classes.append(note.__name__)

    def process_header_lines(self, header_lines: StrHeaderListType) -> None:
        """
        Feed a list of header lines in and parse them.

        Raises InvalidFormatError if one of them can't be handled, leaving
        parsed_headers and the notes as they were.
        """
        hp = HeaderProcessor(self)
        header_lines = list(header_lines)
        note_count = len(self.notes)
        try:
            self.parsed_headers = hp.process(header_lines)
        except InvalidFormatError:
            del self.notes[note_count:]
            del self.note_classes[note_count:]
            raise
        self.headers = header_lines

    def to_string(self) -> str:
        """
        Serialise the parsed headers, one line each, joined with CRLF.
        """
        if not self.parsed_headers:
            return ""
        first, *rest = self.parsed_headers
        return first.to_string_multiple_headers(rest)
