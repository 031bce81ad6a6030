"""
Pytest configuration and shared fixtures for tagjson tests.

Provides immutable test case fixtures for valid documents, malformed
documents with their expected error kind and offset, and scalar literals.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from tagjson import Bool
from tagjson import Dict
from tagjson import Double
from tagjson import Int
from tagjson import List
from tagjson import Null
from tagjson import ParseErrorKind
from tagjson import String


@dataclass(frozen=True)
class ParseCase:
    """
    Immutable container for a parse test case.

    Holds the input and either the expected value or the expected error kind
    and offset.
    """

    description: str
    input_data: str
    expected_output: Any = None
    error_kind: ParseErrorKind | None = None
    error_offset: int = 0


@pytest.fixture(autouse=True)
def _clean_tagjson_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keeps TAGJSON_* variables from the outer environment out of tests."""
    for name in ("TAGJSON_MAX_DEPTH", "TAGJSON_INT_BITS", "TAGJSON_STRICT"):
        monkeypatch.delenv(name, raising=False)


PASS1 = r"""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\"",
        "backslash": "\\",
        "controls": "\b\f\n\r\t",
        "slash": "/ & \/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\u0123\u4567\u89AB\uCDEF\uabcd\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\"object with 1 member\":[\"array with 1 element\"]}"
    }
]"""

PASS2 = '[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]'

PASS3 = """{
    "JSON Test Pattern pass3": {
        "The outermost value": "must be an object or array.",
        "In this test": "It is an object."
    }
}"""


@pytest.fixture
def json_pass_documents() -> list[ParseCase]:
    """
    Provides the json.org JSON_checker pass documents.
    """
    return [
        ParseCase("pass1.json - complex nested structure", PASS1),
        ParseCase("pass2.json - deep nesting", PASS2),
        ParseCase("pass3.json - simple object", PASS3),
    ]


@pytest.fixture
def json_fail_cases() -> list[ParseCase]:
    """
    Provides malformed documents with the error each must raise.

    Most are taken from json.org JSON_checker; offsets are where the parser
    detects the problem.
    """
    end = ParseErrorKind.UNEXPECTED_END
    char = ParseErrorKind.UNEXPECTED_CHAR
    number = ParseErrorKind.NUMBER_FORMAT
    unterminated = ParseErrorKind.UNTERMINATED_STRING

    return [
        ParseCase("fail2.json", '["Unclosed array"', None, end, 17),
        ParseCase(
            "fail3.json", '{unquoted_key: "keys must be quoted"}', None, char, 1
        ),
        ParseCase("fail4.json", '["extra comma",]', None, char, 14),
        ParseCase("fail5.json", '["double extra comma",,]', None, char, 22),
        ParseCase("fail6.json", '[   , "<-- missing value"]', None, char, 4),
        ParseCase("fail7.json", '["Comma after the close"],', None, char, 25),
        ParseCase("fail8.json", '["Extra close"]]', None, char, 15),
        ParseCase("fail9.json", '{"Extra comma": true,}', None, char, 20),
        ParseCase(
            "fail11.json", '{"Illegal expression": 1 + 2}', None, char, 25
        ),
        ParseCase(
            "fail14.json", '{"Numbers cannot be hex": 0x14}', None, number, 25
        ),
        ParseCase("fail16.json", r"[\naked]", None, char, 1),
        ParseCase("fail19.json", '{"Missing colon" null}', None, char, 17),
        ParseCase("fail20.json", '{"Double colon":: null}', None, char, 16),
        ParseCase(
            "fail21.json", '{"Comma instead of colon", null}', None, char, 25
        ),
        ParseCase(
            "fail22.json", '["Colon instead of comma": false]', None, char, 25
        ),
        ParseCase("fail23.json", '["Bad value", truth]', None, char, 14),
        ParseCase("fail24.json", "['single quote']", None, char, 1),
        ParseCase("fail29.json", "[0e]", None, number, 1),
        ParseCase("fail31.json", "[0e+-1]", None, number, 1),
        ParseCase(
            "fail32.json",
            '{"Comma instead if closing brace": true,',
            None,
            end,
            40,
        ),
        ParseCase("fail33.json", '["mismatch"}', None, char, 11),
        ParseCase("unterminated string", '"unterminated', None, unterminated, 0),
        ParseCase("dangling escape", '["a\\', None, unterminated, 1),
        ParseCase("unclosed array", "[1,2", None, end, 4),
        ParseCase("trailing comma in array", "[1,2,]", None, char, 4),
        ParseCase("trailing comma in object", '{"a":1,}', None, char, 6),
        ParseCase("bare literal with junk", "01x", None, number, 0),
        ParseCase("lone minus", "-", None, number, 0),
        ParseCase("lone plus", "+", None, number, 0),
        ParseCase("float overflow", "1e999", None, number, 0),
        ParseCase("missing comma", "[1 2]", None, char, 3),
        ParseCase("truncated keyword", "nul", None, char, 0),
        ParseCase("stray closer", "}", None, char, 0),
        ParseCase("number key", "{1: 2}", None, char, 1),
        ParseCase("open bracket", "[", None, end, 1),
        ParseCase("open brace", "{", None, end, 1),
        ParseCase("key without colon", '{"a"', None, end, 4),
        ParseCase("key without value", '{"a":', None, end, 5),
    ]


@pytest.fixture
def basic_json_values() -> list[ParseCase]:
    """
    Provides basic documents covering every value variant.
    """
    return [
        ParseCase("null value", "null", Null()),
        ParseCase("true boolean", "true", Bool(True)),
        ParseCase("false boolean", "false", Bool(False)),
        ParseCase("integer", "42", Int(42)),
        ParseCase("negative integer", "-17", Int(-17)),
        ParseCase("float", "3.14", Double(3.14)),
        ParseCase("empty string", '""', String("")),
        ParseCase("simple string", '"hello"', String("hello")),
        ParseCase("empty array", "[]", List()),
        ParseCase("empty object", "{}", Dict()),
        ParseCase(
            "simple array", "[1, 2, 3]", List((Int(1), Int(2), Int(3)))
        ),
        ParseCase(
            "simple object",
            '{"key": "value"}',
            Dict({"key": String("value")}),
        ),
    ]
