"""
Formatters for wwwauth output.
"""

from configparser import SectionProxy
import inspect
import sys
from typing import Any, Dict, List, Type, TYPE_CHECKING

from wwwauth.type import OutputMethodType

if TYPE_CHECKING:
    from wwwauth.message import HeaderMessage  # pylint: disable=cyclic-import

_formatter_modules = ["text"]
_formatters = ["text", "txt_verbose"]


def find_formatter(name: str, default: str = "text") -> Type["Formatter"]:
    """
    Find the formatter for name, and use default if it can't be found.
    """
    if name not in _formatters:
        name = default
    for module_base in _formatter_modules:
        try:
            module_name = f"wwwauth.formatter.{module_base}"
            __import__(module_name)
            module = sys.modules[module_name]
        except (ImportError, KeyError, TypeError):
            continue
        for value in list(module.__dict__.values()):
            if (
                inspect.isclass(value)
                and issubclass(value, Formatter)
                and getattr(value, "name") == name
            ):
                return value
    if name != default:
        return find_formatter(default, default)
    raise RuntimeError(f"Can't find a format in {_formatters}")


def available_formatters() -> List[str]:
    """
    Return a list of the available formatter names.
    """
    return _formatters


class Formatter:
    """
    A formatter for HeaderMessages.

    Is available to UIs based upon the 'name' attribute.
    """

    media_type: str  # the media type of the format.
    name: str = "base class"  # the name of the format.

    def __init__(
        self,
        config: SectionProxy,
        message: "HeaderMessage",
        output: OutputMethodType,
        params: Dict[str, Any],
    ) -> None:
        """
        Formatter for the given message, writing
        to the callable output(uni_str). Output is Unicode; callee
        is responsible for encoding correctly.
        """
        self.config = config
        self.message = message
        self.output = output  # output file object
        self.kw = params

    def start_output(self) -> None:
        """
        Send preliminary output.
        """
        raise NotImplementedError

    def finish_output(self) -> None:
        """
        Finalise output.
        """
        raise NotImplementedError

    def error_output(self, message: str) -> None:
        """
        Output an error.
        """
        raise NotImplementedError
