#!/usr/bin/env python

import re
import sys

__all__ = [
    "rfc2617",
    "rfc5234",
    "rfc7230",
    "rfc7235",
]


def check_regex() -> int:
    """Compile all the regex in this package; return how many failed."""
    errors = 0
    for module_name in __all__:
        full_name = f"wwwauth.syntax.{module_name}"
        __import__(full_name)
        module = sys.modules[full_name]
        for attr_name in dir(module):
            if attr_name.startswith("_"):
                continue
            attr_value = getattr(module, attr_name, None)
            if isinstance(attr_value, str) or hasattr(attr_value, "element"):
                try:
                    re.compile(str(attr_value), re.VERBOSE)
                except re.error as why:
                    print("*", module_name, attr_name, why)
                    errors += 1
    return errors


if __name__ == "__main__":
    sys.exit(check_regex())
