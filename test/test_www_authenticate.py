#!/usr/bin/env python

import time
import unittest

from wwwauth import Challenge, InvalidFormatError, TypeMismatchError
from wwwauth.headers import HeaderTest, HttpHeader
from wwwauth.headers._notes import (
    BAD_SYNTAX,
    CHALLENGE_NOT_DIGEST,
    PARAM_NO_VALUE,
    PARAM_REPEATS,
    PARAM_UNBALANCED_QUOTE,
    PARAM_UNKNOWN,
)
from wwwauth.headers.www_authenticate import www_authenticate


class WWWAuthenticateTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ['Digest realm="a", nonce="b"']
    expected_out = {"realm": "a", "nonce": "b"}
    expected_raw = 'realm="a", nonce="b"'
    expected_err = []


class WWWAuthenticateFullTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = [
        'Digest realm="testrealm@host.com", domain="/a /b", nonce="dcd98b7102dd2f0e8b11d0f600bfb0c093", '
        'algorithm=MD5-sess, opaque="5ccc069c403ebaf9f0171e9517f40e41", stale=FALSE, qop="auth"'
    ]
    expected_out = {
        "realm": "testrealm@host.com",
        "nonce": "dcd98b7102dd2f0e8b11d0f600bfb0c093",
        "algorithm": "MD5-sess",
        "domain": "/a /b",
        "qop": "auth",
        "opaque": "5ccc069c403ebaf9f0171e9517f40e41",
        "stale": "FALSE",
    }
    expected_err = []


class WWWAuthenticateQuotedCommaTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ['Digest realm="r", qop="auth,auth-int"']
    expected_out = {"realm": "r", "qop": '"auth'}
    expected_err = [PARAM_UNBALANCED_QUOTE, PARAM_UNKNOWN]


class WWWAuthenticateBareStaleTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ["Digest stale"]
    expected_out = {"stale": None}
    expected_raw = "stale"
    expected_err = [BAD_SYNTAX, PARAM_NO_VALUE]


class WWWAuthenticateUnknownParamTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ['Digest foo="bar", realm="a"']
    expected_out = {"realm": "a"}
    expected_err = [PARAM_UNKNOWN]


class WWWAuthenticateParamCaseTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ['Digest REALM="a", No-Nce="b", Al_gorithm=MD5']
    expected_out = {"realm": "a", "nonce": "b", "algorithm": "MD5"}
    expected_err = []


class WWWAuthenticateRepeatTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ['Digest realm="a", realm="b"']
    expected_out = {"realm": "b"}
    expected_err = [PARAM_REPEATS]


class WWWAuthenticateNotDigestTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ['Basic realm="a"']
    expected_out = {}
    expected_raw = 'Basic realm="a"'
    expected_err = [CHALLENGE_NOT_DIGEST, BAD_SYNTAX, PARAM_UNKNOWN]


class WWWAuthenticateSchemeCaseTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ['digest realm="a"']
    expected_out = {}
    expected_raw = 'digest realm="a"'
    expected_err = [CHALLENGE_NOT_DIGEST, BAD_SYNTAX, PARAM_UNKNOWN]


class WWWAuthenticateSpaceAfterEqualsTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ['Digest realm=  "a"']
    expected_out = {"realm": "a"}
    expected_err = []


class WWWAuthenticateNoSpaceAfterCommaTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ['Digest realm="a",nonce="b"']
    expected_out = {"realm": "a", "nonce": "b"}
    expected_err = []


class WWWAuthenticateSpaceBeforeCommaTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ['Digest realm="a b" , nonce=x']
    expected_out = {"realm": '"a b" ', "nonce": "x"}
    expected_err = [PARAM_UNBALANCED_QUOTE]


class WWWAuthenticateEmptyTest(HeaderTest):
    name = "WWW-Authenticate"
    inputs = ["Digest "]
    expected_out = {}
    expected_raw = ""
    expected_err = [BAD_SYNTAX]


class ChallengeParseTest(unittest.TestCase):
    def test_attributes(self) -> None:
        challenge = Challenge.from_string('WWW-Authenticate: Digest realm="a", nonce="b"')
        self.assertIsInstance(challenge, www_authenticate)
        self.assertEqual(challenge.realm, "a")
        self.assertEqual(challenge.get_realm(), "a")
        self.assertEqual(challenge.get_nonce(), "b")
        self.assertIsNone(challenge.get_algorithm())
        self.assertIsNone(challenge.get_domain())
        self.assertIsNone(challenge.get_qop())
        self.assertIsNone(challenge.get_opaque())
        self.assertIsNone(challenge.get_stale())
        self.assertEqual(challenge.raw_value, 'realm="a", nonce="b"')
        self.assertEqual(challenge.field_value, 'realm="a", nonce="b"')
        self.assertEqual(challenge.field_name, "WWW-Authenticate")

    def test_field_name_case(self) -> None:
        challenge = Challenge.from_string('www-authenticate: Digest realm="a"')
        self.assertEqual(challenge.realm, "a")
        challenge = Challenge.from_string('WWW-AUTHENTICATE: Digest realm="a"')
        self.assertEqual(challenge.realm, "a")

    def test_wrong_field_name(self) -> None:
        with self.assertRaises(InvalidFormatError) as caught:
            Challenge.from_string('Authorization: Digest realm="a"')
        self.assertEqual(caught.exception.field_name, "Authorization")
        self.assertIn('"Authorization"', str(caught.exception))
        self.assertIsInstance(caught.exception, ValueError)

    def test_no_separator(self) -> None:
        with self.assertRaises(InvalidFormatError) as caught:
            Challenge.from_string("WWW-Authenticate:Digest realm=a")
        self.assertEqual(caught.exception.field_name, "WWW-Authenticate:Digest realm=a")

    def test_bare_stale(self) -> None:
        challenge = Challenge.from_string("WWW-Authenticate: Digest stale")
        self.assertIsNone(challenge.stale)
        self.assertNotEqual(challenge.stale, "true")
        self.assertEqual(challenge.params_seen, ["stale"])
        self.assertEqual(challenge.attributes(seen_only=True), {"stale": None})

    def test_stale_kept_as_text(self) -> None:
        challenge = Challenge.from_string("WWW-Authenticate: Digest stale=true")
        self.assertEqual(challenge.stale, "true")

    def test_quotes(self) -> None:
        challenge = Challenge.from_string(
            'WWW-Authenticate: Digest realm="abc", nonce=abc, opaque=""'
        )
        self.assertEqual(challenge.realm, "abc")
        self.assertEqual(challenge.nonce, "abc")
        self.assertEqual(challenge.opaque, "")

    def test_no_unescaping(self) -> None:
        challenge = Challenge.from_string(r'WWW-Authenticate: Digest realm="a\"b"')
        self.assertEqual(challenge.realm, r"a\"b")

    def test_first_equals(self) -> None:
        challenge = Challenge.from_string("WWW-Authenticate: Digest nonce=a=b==")
        self.assertEqual(challenge.nonce, "a=b==")

    def test_last_wins(self) -> None:
        challenge = Challenge.from_string(
            'WWW-Authenticate: Digest realm="a", Realm="b", nonce="n", REALM'
        )
        self.assertIsNone(challenge.realm)
        self.assertEqual(challenge.nonce, "n")
        self.assertEqual(challenge.params_seen, ["realm", "nonce"])

    def test_empty(self) -> None:
        challenge = Challenge.from_string("WWW-Authenticate: ")
        self.assertEqual(challenge.raw_value, "")
        self.assertEqual(challenge.attributes(seen_only=True), {})
        self.assertEqual(
            challenge.attributes(),
            {
                "realm": None,
                "nonce": None,
                "algorithm": None,
                "domain": None,
                "qop": None,
                "opaque": None,
                "stale": None,
            },
        )

    def test_notes(self) -> None:
        notes = []

        def add_note(note, **kw):
            notes.append((note, kw))

        Challenge.from_string('WWW-Authenticate: Digest foo=bar, realm="a"', add_note)
        self.assertEqual(
            notes,
            [(PARAM_UNKNOWN, {"field_name": "WWW-Authenticate", "param": "foo"})],
        )

    def test_dispatch_table(self) -> None:
        self.assertEqual(
            set(www_authenticate.param_setters),
            {"realm", "nonce", "algorithm", "domain", "qop", "opaque", "stale"},
        )
        for setter in www_authenticate.param_setters.values():
            self.assertTrue(callable(getattr(www_authenticate, setter)))

    def test_many_params_bad_tail(self) -> None:
        params = ", ".join(['realm="a"'] * 360)
        notes = []

        def add_note(note, **kw):
            notes.append(note)

        started = time.monotonic()
        challenge = Challenge.from_string(
            f"WWW-Authenticate: Digest {params}, @", add_note
        )
        self.assertLess(time.monotonic() - started, 2)
        self.assertEqual(challenge.realm, "a")
        self.assertEqual(challenge.params_seen, ["realm"])
        self.assertEqual(challenge.raw_value, f"{params}, @")
        self.assertEqual(notes.count(BAD_SYNTAX), 1)
        self.assertEqual(notes.count(PARAM_REPEATS), 359)
        self.assertEqual(notes.count(PARAM_UNKNOWN), 1)

    def test_repeatable(self) -> None:
        line = 'WWW-Authenticate: Digest realm="a", nonce="b"'
        first = Challenge.from_string(line)
        second = Challenge.from_string(line)
        self.assertIsNot(first, second)
        self.assertEqual(first.attributes(), second.attributes())


class ChallengeModelTest(unittest.TestCase):
    def test_fluent_setters(self) -> None:
        challenge = Challenge()
        result = (
            challenge.set_realm("r")
            .set_nonce("n")
            .set_algorithm("MD5")
            .set_domain("/")
            .set_qop("auth")
            .set_opaque("o")
            .set_stale("false")
        )
        self.assertIs(result, challenge)
        self.assertEqual(
            challenge.attributes(),
            {
                "realm": "r",
                "nonce": "n",
                "algorithm": "MD5",
                "domain": "/",
                "qop": "auth",
                "opaque": "o",
                "stale": "false",
            },
        )

    def test_raw_value_read_only(self) -> None:
        challenge = Challenge.from_string('WWW-Authenticate: Digest realm="a"')
        with self.assertRaises(AttributeError):
            challenge.raw_value = "changed"  # type: ignore

    def test_new_challenge_serialises_empty(self) -> None:
        self.assertEqual(Challenge().to_string(), "WWW-Authenticate: ")


class ChallengeSerialiseTest(unittest.TestCase):
    def test_to_string(self) -> None:
        challenge = Challenge.from_string('WWW-Authenticate: Digest realm="a", nonce="b"')
        self.assertEqual(challenge.to_string(), 'WWW-Authenticate: realm="a", nonce="b"')
        self.assertEqual(challenge.to_string(), challenge.to_string())
        self.assertEqual(str(challenge), challenge.to_string())

    def test_to_string_keeps_spacing(self) -> None:
        challenge = Challenge.from_string(
            "WWW-Authenticate: Digest realm=a,nonce=  b ,  foo"
        )
        self.assertEqual(
            challenge.to_string(), "WWW-Authenticate: realm=a,nonce=  b ,  foo"
        )

    def test_setters_dont_change_output(self) -> None:
        challenge = Challenge.from_string('WWW-Authenticate: Digest realm="a"')
        before = challenge.to_string()
        challenge.set_realm("other").set_nonce("new").set_stale("true")
        self.assertEqual(challenge.to_string(), before)
        self.assertEqual(challenge.field_value, 'realm="a"')

    def test_multiple(self) -> None:
        primary = Challenge.from_string("WWW-Authenticate: Digest X")
        peers = [
            Challenge.from_string("WWW-Authenticate: Digest Y"),
            Challenge.from_string("WWW-Authenticate: Digest Z"),
        ]
        self.assertEqual(
            primary.to_string_multiple_headers(peers),
            "WWW-Authenticate: X\r\nWWW-Authenticate: Y\r\nWWW-Authenticate: Z",
        )

    def test_multiple_empty(self) -> None:
        primary = Challenge.from_string('WWW-Authenticate: Digest realm="a"')
        self.assertEqual(primary.to_string_multiple_headers([]), primary.to_string())

    def test_multiple_foreign(self) -> None:
        class OtherHeader(HttpHeader):
            canonical_name = "Other"

        primary = Challenge.from_string('WWW-Authenticate: Digest realm="a"')
        peer = Challenge.from_string('WWW-Authenticate: Digest realm="b"')
        with self.assertRaises(TypeMismatchError) as caught:
            primary.to_string_multiple_headers([peer, OtherHeader()])
        self.assertIs(caught.exception.expected, www_authenticate)
        self.assertIs(caught.exception.received, OtherHeader)
        with self.assertRaises(TypeMismatchError):
            primary.to_string_multiple_headers(['WWW-Authenticate: realm="b"'])  # type: ignore

    def test_multiple_subclass(self) -> None:
        class proxy_challenge(www_authenticate):
            pass

        primary = Challenge.from_string('WWW-Authenticate: Digest realm="a"')
        with self.assertRaises(TypeMismatchError):
            primary.to_string_multiple_headers([proxy_challenge()])


if __name__ == "__main__":
    unittest.main()
