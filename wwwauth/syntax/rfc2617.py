"""
Regex for RFC2617

These regex are derived from the ABNF for the Digest access authentication
challenge in RFC2617, Section 3.2.1:

  <https://tools.ietf.org/html/rfc2617#section-3.2.1>

They should be processed with re.VERBOSE | re.IGNORECASE.
"""

# pylint: disable=invalid-name

from .rfc5234 import DQUOTE, SP
from .rfc7230 import list_rule, BWS, quoted_string, token
from .rfc7235 import auth_param

SPEC_URL = "https://tools.ietf.org/html/rfc2617"


# realm-value = quoted-string
# realm = "realm" "=" realm-value

realm = rf"(?: realm {BWS} = {BWS} {quoted_string} )"

# URI = absoluteURI | abs_path
# domain = "domain" "=" <"> URI ( 1*SP URI ) <">

domain_uri = r"""[^\x00-\x20"\x7f]+"""

domain = rf"(?: domain {BWS} = {BWS} {DQUOTE} {domain_uri} (?: {SP}+ {domain_uri} )* {DQUOTE} )"

# nonce-value = quoted-string
# nonce = "nonce" "=" nonce-value

nonce = rf"(?: nonce {BWS} = {BWS} {quoted_string} )"

# opaque = "opaque" "=" quoted-string

opaque = rf"(?: opaque {BWS} = {BWS} {quoted_string} )"

# stale = "stale" "=" ( "true" | "false" )

stale = rf"(?: stale {BWS} = {BWS} (?: true | false ) )"

# algorithm = "algorithm" "=" ( "MD5" | "MD5-sess" | token )

algorithm = rf"(?: algorithm {BWS} = {BWS} (?: MD5 | MD5-sess | {token} ) )"

# qop-value = "auth" | "auth-int" | token
# qop-options = "qop" "=" <"> 1#qop-value <">

qop_value = rf"(?: auth | auth-int | {token} )"

qop_options = rf"(?: qop {BWS} = {BWS} {DQUOTE} {list_rule(qop_value, 1)} {DQUOTE} )"

# digest-challenge = 1#( realm | [ domain ] | nonce | [ opaque ] | [ stale ]
#                      | [ algorithm ] | [ qop-options ] | [ auth-param ] )

# Every parameter above is also an auth-param. Elements are matched as auth-param
# alone; alternating between overlapping rules backtracks exponentially when the
# list fails to match.

digest_challenge = list_rule(auth_param, 1)

# challenge = "Digest" digest-challenge

challenge = rf"(?: Digest {SP}+ {digest_challenge} )"
