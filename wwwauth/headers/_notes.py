"""
Common header-related Notes.
"""

from wwwauth.speak import Note, categories, levels


class BAD_SYNTAX(Note):
    category = categories.GENERAL
    level = levels.BAD
    summary = "The %(field_name)s header's syntax isn't valid."
    text = """\
The value for this header doesn't conform to its specified syntax; see [its
definition](%(ref_uri)s) for more information.

The header has still been parsed, leniently; parameters that could be recognised have been kept."""


class CHALLENGE_NOT_DIGEST(Note):
    category = categories.CHALLENGE
    level = levels.WARN
    summary = "The %(field_name)s header doesn't start with the Digest scheme."
    text = """\
A Digest challenge starts with the scheme name `Digest`, followed by a single space and its
parameters.

This header doesn't start with exactly `Digest `, so the whole of its value has been treated as
the parameter list. Note that the scheme name is matched case-sensitively here."""


class PARAM_UNKNOWN(Note):
    category = categories.CHALLENGE
    level = levels.INFO
    summary = "The '%(param)s' parameter on the %(field_name)s header isn't recognised."
    text = """\
Digest challenges define the `realm`, `nonce`, `algorithm`, `domain`, `qop`, `opaque` and `stale`
parameters. The `%(param)s` parameter isn't one of them, so it has been ignored.

It is still kept in the header's value when the header is serialised."""


class PARAM_NO_VALUE(Note):
    category = categories.CHALLENGE
    level = levels.WARN
    summary = "The '%(param)s' parameter on the %(field_name)s header has no value."
    text = """\
Every parameter in a Digest challenge takes the form `name=value`. The `%(param)s` parameter
doesn't have an equals sign, so its value has been set to nothing (not to `true`)."""


class PARAM_REPEATS(Note):
    category = categories.CHALLENGE
    level = levels.WARN
    summary = "The '%(param)s' parameter repeats in the %(field_name)s header."
    text = """\
Parameters on the %(field_name)s header should not repeat; implementations may handle them
differently.

The last occurrence has been used."""


class PARAM_UNBALANCED_QUOTE(Note):
    category = categories.CHALLENGE
    level = levels.WARN
    summary = "The '%(param)s' parameter on the %(field_name)s header has unbalanced quotes."
    text = """\
The value of the `%(param)s` parameter starts or ends with a double quote, but not both. It has
been used as-is: `%(param_val)s`.

This often happens when a quoted value contains a comma, which separates parameters."""


class HEADER_TOO_LARGE(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "The %(field_name)s header is very large (%(header_size)s bytes)."
    text = """\
Some implementations limit the size of any single header line, so a very large challenge may not
be seen in full by clients or intermediaries."""
