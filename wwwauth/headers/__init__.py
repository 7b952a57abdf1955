#!/usr/bin/env python

"""
Header handlers.

Each handler lives in a module named after its field name, lower-cased with
'-' replaced by '_' (e.g., wwwauth.headers.www_authenticate), in a class of
the same name.
"""

from functools import partial
import re
import sys
from typing import (
    Any,
    Dict,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
    TYPE_CHECKING,
)
import unittest

from wwwauth.speak import Note
from wwwauth.syntax import rfc7230
from wwwauth.type import AddNoteMethodType, AttributeDictType, StrHeaderListType

from ._utils import RE_FLAGS
from ._notes import BAD_SYNTAX, HEADER_TOO_LARGE

if TYPE_CHECKING:
    from wwwauth.message import HeaderMessage  # pylint: disable=cyclic-import

### configuration
MAX_HDR_SIZE = 4 * 1024

HEADER_LINE_SEPARATOR = "\r\n"

HeaderType = TypeVar("HeaderType", bound="HttpHeader")


class InvalidFormatError(ValueError):
    """
    A header line can't be handled, because its field name isn't the one expected.
    """

    def __init__(self, message: str, field_name: str) -> None:
        ValueError.__init__(self, message)
        self.field_name = field_name


class TypeMismatchError(TypeError):
    """
    Headers of different types were asked to be serialised together.
    """

    def __init__(self, expected: type, received: type) -> None:
        TypeError.__init__(
            self,
            f"The {expected.__name__} multiple header implementation can only accept "
            f"{expected.__name__} headers; got {received.__name__}",
        )
        self.expected = expected
        self.received = received


def split_header_line(header_line: str) -> Tuple[str, str]:
    """
    Split a header line into its field name and field value, on the first ": ".

    A line without one is all name, with an empty value.
    """
    try:
        name, value = header_line.split(": ", 1)
    except ValueError:
        return header_line, ""
    return name, value


def ignore_note(note: Type[Note], **kw: Union[str, int]) -> None:
    "An add_note method that drops everything."


class HttpHeader:
    """A HTTP Header handler."""

    canonical_name: str = None
    description: str = None
    reference: str = None
    syntax: Union[
        str, rfc7230.list_rule, bool
    ] = None  # Verbose regular expression to match.
    list_header: bool = None  # Can be split into values on commas.
    valid_in_requests: bool = None
    valid_in_responses: bool = None
    params: Tuple[str, ...] = ()  # Names of the parsed attributes.

    def __init__(self) -> None:
        self._raw_value = ""
        self.params_seen: List[str] = []  # in the order first seen

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{self.__class__.__module__}.{self.__class__.__name__} {self._raw_value!r}>"

    @classmethod
    def from_string(
        cls: Type[HeaderType],
        header_line: str,
        add_note: Optional[AddNoteMethodType] = None,
    ) -> HeaderType:
        """
        Given a complete header line ("Name: value"), return a new header.

        Raises InvalidFormatError if the line is for a different header.
        """
        name, value = split_header_line(header_line)
        if name.lower() != cls.canonical_name.lower():
            raise InvalidFormatError(
                f'Invalid header line for {cls.canonical_name} string: "{name}"', name
            )
        if add_note is None:
            add_note = ignore_note
        else:
            add_note = partial(add_note, field_name=cls.canonical_name)
        header = cls()
        header.parse(value, add_note)
        return header

    def parse(self, field_value: str, add_note: AddNoteMethodType) -> None:
        """
        Given a string value and an add_note function, populate the header.
        """
        self._raw_value = field_value

    def check_syntax(self, field_value: str, add_note: AddNoteMethodType) -> bool:
        """
        Check field_value against the header's syntax, making a note if it doesn't match.
        """
        if not self.syntax:
            return True
        element_syntax = (
            self.syntax.element
            if isinstance(self.syntax, rfc7230.list_rule) and self.list_header
            else self.syntax
        )
        if not re.match(rf"^\s*(?:{element_syntax})\s*$", field_value, RE_FLAGS):
            add_note(BAD_SYNTAX, ref_uri=self.reference)
            return False
        return True

    @property
    def raw_value(self) -> str:
        "The field value as received."
        return self._raw_value

    @property
    def field_name(self) -> str:
        return self.canonical_name

    @property
    def field_value(self) -> str:
        return self._raw_value

    def attributes(self, seen_only: bool = False) -> AttributeDictType:
        """
        Return the parsed attributes, in the order they're defined.

        If seen_only is true, leave out those that weren't in the header line.
        """
        return {
            name: getattr(self, name)
            for name in self.params
            if not seen_only or name in self.params_seen
        }

    def to_string(self) -> str:
        return f"{self.field_name}: {self.field_value}"

    def to_string_multiple_headers(self, headers: Sequence["HttpHeader"]) -> str:
        """
        Serialise this header followed by headers, one line each.

        Every one of headers has to be exactly the same type as this one.
        """
        strings = [self.to_string()]
        for header in headers:
            if type(header) is not type(self):  # pylint: disable=unidiomatic-typecheck
                raise TypeMismatchError(type(self), type(header))
            strings.append(header.to_string())
        return HEADER_LINE_SEPARATOR.join(strings)


class HeaderProcessor:
    """
    Parses a set of header lines.
    """

    def __init__(self, message: "HeaderMessage") -> None:
        self.message = message

    def process(self, header_lines: StrHeaderListType) -> List[HttpHeader]:
        """
        Given a list of header lines:
         - find the handler for each and parse it
         - call message.add_note as appropriate
        Returns a list of parsed headers, in order.

        Raises InvalidFormatError for a line that no handler accepts.
        """
        parsed_headers = []
        offset = 0  # what number header we're on

        for header_line in header_lines:
            offset += 1
            add_note = partial(self.message.add_note, f"offset-{offset}")

            field_name, _ = split_header_line(header_line)
            header_handler = self.find_header_handler(field_name)
            if header_handler is None:
                raise InvalidFormatError(
                    f'No handler for header line: "{field_name}"', field_name
                )
            parsed_headers.append(header_handler.from_string(header_line, add_note))

            header_size = len(header_line)
            if header_size > MAX_HDR_SIZE:
                add_note(
                    HEADER_TOO_LARGE,
                    field_name=header_handler.canonical_name,
                    header_size=header_size,
                )

        return parsed_headers

    @staticmethod
    def find_header_handler(header_name: str) -> Optional[Type[HttpHeader]]:
        """
        Return a header handler class for the given field name, or None.
        """
        name_token = HeaderProcessor.name_token(header_name)
        hdr_module = HeaderProcessor.find_header_module(name_token)
        if hdr_module and hasattr(hdr_module, name_token):
            handler = getattr(hdr_module, name_token)
            if isinstance(handler, type) and issubclass(handler, HttpHeader):
                return handler
        return None

    @staticmethod
    def find_header_module(header_name: str) -> Any:
        """
        Return a module for the given field name, or None if it can't be found.
        """
        name_token = HeaderProcessor.name_token(header_name)
        if not re.match(rf"^{rfc7230.token}$", name_token, RE_FLAGS):
            return None
        if name_token[0] == "_":  # these are special
            return None
        try:
            module_name = f"wwwauth.headers.{name_token}"
            __import__(module_name)
            return sys.modules[module_name]
        except (ImportError, KeyError, TypeError, ValueError):
            return None

    @staticmethod
    def name_token(header_name: str) -> str:
        """
        Return a tokenised, python-friendly name for a header.
        """
        return header_name.strip().replace("-", "_").lower()


class HeaderTest(unittest.TestCase):
    """
    Testing machinery for headers.
    """

    name: str = None
    inputs: List[str] = []
    expected_out: Dict[str, Optional[str]] = {}
    expected_raw: str = None
    expected_err: List[Type[Note]] = []

    def setUp(self) -> None:
        "Test setup."
        from wwwauth.message import HeaderMessage  # pylint: disable=import-outside-toplevel

        self.message = HeaderMessage()

    def test_header(self) -> Any:
        "Test the header."
        if not self.name:
            return self.skipTest("")
        self.message.process_header_lines([f"{self.name}: {inp}" for inp in self.inputs])
        out = self.message.parsed_headers[-1]
        self.assertEqual(self.expected_out, out.attributes(seen_only=True))
        if self.expected_raw is not None:
            self.assertEqual(self.expected_raw, out.field_value)
        diff = {n.__name__ for n in self.expected_err}.symmetric_difference(
            set(self.message.note_classes)
        )
        for message in self.message.notes:  # check formatting
            self.assertTrue(message.show_summary())
            self.assertTrue(message.show_text())
        self.assertEqual(len(diff), 0, f"Mismatched notes: {diff}")
        return None
