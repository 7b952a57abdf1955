"""
Parse and serialise HTTP WWW-Authenticate Digest challenges.
"""

__version__ = "1.0.0"

from wwwauth.headers import InvalidFormatError, TypeMismatchError
from wwwauth.headers.www_authenticate import www_authenticate

Challenge = www_authenticate

__all__ = ["Challenge", "InvalidFormatError", "TypeMismatchError", "__version__"]
