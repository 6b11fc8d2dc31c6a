"""
Value coercion for parsed arguments.

Raw token values are strings. The default coercion turns them into numbers,
booleans or JSON structures where they look like one, and leaves them alone
otherwise. A caller can override this per argument with a lookup that maps
an argument identifier (its name, or its token index for positional
arguments) to a custom coercer.
"""

import json
import logging
import dataclasses as dt

from typing import Any, Callable, Optional, Union

_logger = logging.getLogger(__name__)

Ident = Union[str, int]
Value = Any
CoercerFn = Callable[[str], Value]
CoercerLookup = Callable[[Ident], Any]

_JSON_START = ("{", "[")
_RADIX = {"0x": 16, "0o": 8, "0b": 2}
_INFINITY = ("Infinity", "+Infinity", "-Infinity")


@dt.dataclass
class Coerced:
    """
    Outcome of coercing one value.

    Attributes:
        value: The coerced value, or the fallback value when coercion failed.
        diagnostic: Why coercion failed, None on success.
    """

    value: Value
    diagnostic: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


# --- Numbers ---------------------------------------------------------------- #


def _tryParseInt(s: str) -> Optional[int]:
    """Tries to parse a decimal or prefixed integer literal, returning None if unsuccessful."""
    lower = s.lower()
    if lower[:2] in _RADIX:
        if s[2:3] in ("+", "-"):
            return None
        try:
            return int(s[2:], _RADIX[lower[:2]])
        except ValueError:
            return None

    try:
        return int(s, 10)
    except ValueError:
        return None


def _tryParseFloat(s: str) -> Optional[float]:
    """Tries to parse a decimal float literal, returning None if unsuccessful."""
    if s in _INFINITY:
        return float(s.replace("Infinity", "inf"))

    # float() also knows about nan and inf, which are not numbers here
    if not any(c.isdigit() for c in s) or any(c.isalpha() and c not in "eE" for c in s):
        return None

    try:
        return float(s)
    except ValueError:
        return None


def tryParseNumber(s: str) -> Optional[int | float]:
    """
    Parses a numeric literal.

    Surrounding whitespace is ignored. Signed decimal integers, unsigned
    0x/0o/0b literals, decimal floats with an optional exponent and a signed
    Infinity are numbers. Empty, whitespace-only and non-ASCII strings are not.

    Returns:
        The number, or None if `s` is not a numeric literal.
    """
    s = s.strip()
    if not s or "_" in s or not s.isascii():
        return None

    n = _tryParseInt(s)
    if n is not None:
        return n

    return _tryParseFloat(s)


# --- JSON ------------------------------------------------------------------- #


def _rejectConstant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant '{name}'")


def parseJson(s: str) -> Value:
    """Parses strict JSON, rejecting the NaN and Infinity extensions."""
    return json.loads(s, parse_constant=_rejectConstant)


# --- Default coercion ------------------------------------------------------- #


def _tryParseValue(value: Value) -> Coerced:
    if not isinstance(value, str):
        return Coerced(value)

    n = tryParseNumber(value)
    if n is not None:
        return Coerced(n)

    lower = value.lower()
    if lower == "true":
        return Coerced(True)
    if lower == "false":
        return Coerced(False)

    if value.startswith(_JSON_START):
        try:
            return Coerced(parseJson(value))
        except ValueError as e:
            return Coerced(value, f"Invalid JSON value '{value}': {e}")

    return Coerced(value)


def parseValue(value: Value) -> Value:
    """
    Coerces a raw argument value.

    Numbers first, then case-insensitive true/false, then JSON objects and
    arrays. Anything else, including malformed JSON, comes back unchanged.
    Non-string values are returned as is.
    """
    result = _tryParseValue(value)
    if not result.ok:
        _logger.warning(result.diagnostic)
    return result.value


# --- Strategies ------------------------------------------------------------- #


class Coercer:
    """Turns a raw argument value into a typed one."""

    def coerce(self, raw: str) -> Value:
        raise NotImplementedError()

    def __call__(self, raw: str) -> Value:
        return self.coerce(raw)


class DefaultCoercer(Coercer):
    def coerce(self, raw: str) -> Value:
        return parseValue(raw)


class FunctionCoercer(Coercer):
    fn: CoercerFn

    def __init__(self, fn: CoercerFn):
        self.fn = fn

    def coerce(self, raw: str) -> Value:
        return self.fn(raw)

    def __repr__(self) -> str:
        return f"FunctionCoercer({self.fn!r})"


DEFAULT = DefaultCoercer()


def lookupCoercer(ident: Ident, lookup: Optional[CoercerLookup]) -> Coercer:
    """
    Selects the coercer for an argument.

    The lookup may return a `Coercer`, a plain callable or None. Anything
    else selects the default coercer. Errors raised by the lookup propagate.
    """
    if lookup is None:
        return DEFAULT

    custom = lookup(ident)
    if isinstance(custom, Coercer):
        return custom
    if callable(custom):
        return FunctionCoercer(custom)
    return DEFAULT


def coerceValue(
    ident: Ident, raw: str, lookup: Optional[CoercerLookup] = None
) -> Coerced:
    """
    Coerces the raw value of the argument `ident`.

    A custom coercer's result is used verbatim. If the lookup or the coercer
    raises, the failure is logged and the raw value is kept. Never raises.
    """
    try:
        coercer = lookupCoercer(ident, lookup)
    except Exception as e:
        result = Coerced(raw, f"Error getting coercer for arg {ident!r}: {e}")
        _logger.warning(result.diagnostic)
        return result

    try:
        return Coerced(coercer.coerce(raw))
    except Exception as e:
        result = Coerced(raw, f"Error coercing the value for arg {ident!r} ({raw!r}): {e}")
        _logger.warning(result.diagnostic)
        return result
