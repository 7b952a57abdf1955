#!/usr/bin/env python

from typing import Optional

from wwwauth import headers
from wwwauth.headers._notes import (
    CHALLENGE_NOT_DIGEST,
    PARAM_NO_VALUE,
    PARAM_REPEATS,
    PARAM_UNBALANCED_QUOTE,
    PARAM_UNKNOWN,
)
from wwwauth.headers._utils import (
    normalize_param_name,
    split_param,
    split_tokens,
    unquote_outer,
)
from wwwauth.syntax import rfc2617, rfc7235
from wwwauth.type import AddNoteMethodType


class www_authenticate(headers.HttpHeader):
    """
    A Digest challenge, from one WWW-Authenticate header line.

    Serialising always uses the value as it was received; changing the
    attributes afterwards doesn't affect it.
    """

    canonical_name = "WWW-Authenticate"
    description = """\
The `WWW-Authenticate` response header consists of at least one challenge that
indicates the authentication scheme(s) and parameters applicable."""
    reference = f"{rfc7235.SPEC_URL}#header.www-authenticate"
    syntax = rfc2617.digest_challenge
    list_header = False
    valid_in_requests = False
    valid_in_responses = True
    scheme = "Digest"
    params = ("realm", "nonce", "algorithm", "domain", "qop", "opaque", "stale")
    # normalised parameter name -> setter
    param_setters = {name: f"set_{name}" for name in params}

    def __init__(self) -> None:
        headers.HttpHeader.__init__(self)
        self.realm: Optional[str] = None
        self.nonce: Optional[str] = None
        self.algorithm: Optional[str] = None
        self.domain: Optional[str] = None
        self.qop: Optional[str] = None
        self.opaque: Optional[str] = None
        self.stale: Optional[str] = None

    def parse(self, field_value: str, add_note: AddNoteMethodType) -> None:
        prefix = f"{self.scheme} "
        if field_value.startswith(prefix):
            self._raw_value = field_value[len(prefix) :]
        else:
            add_note(CHALLENGE_NOT_DIGEST)
            self._raw_value = field_value
        self.check_syntax(self._raw_value, add_note)

        for token in split_tokens(self._raw_value):
            key, raw_val = split_param(token)
            val = unquote_outer(raw_val)
            norm_key = normalize_param_name(key)
            if norm_key not in self.param_setters:
                if key:
                    add_note(PARAM_UNKNOWN, param=key)
                continue
            if raw_val is None:
                add_note(PARAM_NO_VALUE, param=key)
            elif val == raw_val and (val.startswith('"') or val.endswith('"')):
                add_note(PARAM_UNBALANCED_QUOTE, param=key, param_val=val)
            if norm_key in self.params_seen:
                add_note(PARAM_REPEATS, param=norm_key)
            else:
                self.params_seen.append(norm_key)
            getattr(self, self.param_setters[norm_key])(val)

    def get_realm(self) -> Optional[str]:
        return self.realm

    def set_realm(self, realm: Optional[str]) -> "www_authenticate":
        self.realm = realm
        return self

    def get_nonce(self) -> Optional[str]:
        return self.nonce

    def set_nonce(self, nonce: Optional[str]) -> "www_authenticate":
        self.nonce = nonce
        return self

    def get_algorithm(self) -> Optional[str]:
        return self.algorithm

    def set_algorithm(self, algorithm: Optional[str]) -> "www_authenticate":
        self.algorithm = algorithm
        return self

    def get_domain(self) -> Optional[str]:
        return self.domain

    def set_domain(self, domain: Optional[str]) -> "www_authenticate":
        self.domain = domain
        return self

    def get_qop(self) -> Optional[str]:
        return self.qop

    def set_qop(self, qop: Optional[str]) -> "www_authenticate":
        self.qop = qop
        return self

    def get_opaque(self) -> Optional[str]:
        return self.opaque

    def set_opaque(self, opaque: Optional[str]) -> "www_authenticate":
        self.opaque = opaque
        return self

    def get_stale(self) -> Optional[str]:
        "stale is kept as text; it isn't converted to a boolean."
        return self.stale

    def set_stale(self, stale: Optional[str]) -> "www_authenticate":
        self.stale = stale
        return self
