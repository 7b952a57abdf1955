import re
from typing import List, Optional, Tuple

RE_FLAGS = re.VERBOSE | re.IGNORECASE

TOKEN_SEPARATOR = re.compile(r",\s*")
PARAM_SEPARATOR = re.compile(r"=\s*")
QUOTED_VALUE = re.compile(r'^"(.*)"$')


def split_tokens(instr: str) -> List[str]:
    """
    Split a challenge's parameter list on commas and any whitespace after them.

    Commas inside quoted strings are not treated specially, and an empty
    string gives a single empty token.
    """
    return TOKEN_SEPARATOR.split(instr)


def split_param(param: str) -> Tuple[str, Optional[str]]:
    """
    Split a name=value parameter on the first equals sign, dropping any
    whitespace right after it. A parameter without one has a value of None.
    """
    if "=" not in param:
        return param, None
    key, val = PARAM_SEPARATOR.split(param, 1)
    return key, val


def unquote_outer(instr: Optional[str]) -> Optional[str]:
    """
    Remove one pair of double quotes wrapping the whole of instr.

    Backslash escapes inside are left alone.
    """
    if instr is None:
        return None
    match = QUOTED_VALUE.match(instr)
    if match:
        return match.group(1)
    return instr


def normalize_param_name(name: str) -> str:
    "Fold a parameter name for lookup: lower-case, without '-' or '_'."
    return name.lower().replace("-", "").replace("_", "")
