"""Parsing pipeline built from lifted stages."""
from errlift import Failure, Success, lift, lifted


class ParseError(Exception):
    pass


class RangeError(Exception):
    pass


class DomainError(Exception):
    def __init__(self, kind, cause):
        super().__init__(f"{kind}: {cause}")
        self.kind = kind
        self.cause = cause

    @classmethod
    def from_error(cls, error):
        if isinstance(error, ParseError):
            return cls("parse", error)
        return cls("range", error)


def parse_int(text):
    try:
        return Success(int(text))
    except ValueError:
        return Failure(ParseError(text))


@lifted(DomainError)
def check_percentage(n):
    if 0 <= n <= 100:
        return Success(n)
    return Failure(RangeError(n))


def run(raw):
    return Success(raw).and_then(lift(parse_int, DomainError)).and_then(check_percentage)


def test_valid_input():
    assert run("42") == Success(42)


def test_malformed_input_becomes_parse_error():
    result = run("abc")
    assert result.is_failure()
    assert result.error.kind == "parse"
    assert isinstance(result.error.cause, ParseError)


def test_out_of_range_becomes_range_error():
    result = run("250")
    assert result.error.kind == "range"
    assert isinstance(result.error.cause, RangeError)
