import logging
import dataclasses as dt

from typing import Any, Optional, Sequence, Union
from . import const
from .coerce import CoercerLookup

_logger = logging.getLogger(__name__)


def _strings(value: Any, default: Sequence[str]) -> tuple[str, ...]:
    """Keeps the string members of a list or tuple, or falls back to `default`."""
    if not isinstance(value, (list, tuple)):
        return tuple(default)
    return tuple(x for x in value if isinstance(x, str))


@dt.dataclass(frozen=True)
class Options:
    """
    Resolved parsing configuration.

    Attributes:
        tokens: The tokens to parse, None when the caller supplies none.
        prefixes: Strings marking a token as a named argument, tried in order.
        delimiters: Strings separating a name from an inline value.
        keepPositionalIndices: Store positional values at their token index instead of appending them.
        valueCoercer: Maps an argument name or positional index to a custom coercer.

    Non-string entries of the sequence fields are dropped, and fields of the
    wrong type fall back to their default.
    """

    tokens: Optional[tuple[str, ...]] = None
    prefixes: tuple[str, ...] = const.DEFAULT_PREFIXES
    delimiters: tuple[str, ...] = const.DEFAULT_DELIMITERS
    keepPositionalIndices: bool = False
    valueCoercer: Optional[CoercerLookup] = None

    def __post_init__(self):
        if self.tokens is not None:
            object.__setattr__(self, "tokens", _strings(self.tokens, ()))
        object.__setattr__(self, "prefixes", _strings(self.prefixes, const.DEFAULT_PREFIXES))
        object.__setattr__(self, "delimiters", _strings(self.delimiters, const.DEFAULT_DELIMITERS))
        if not isinstance(self.keepPositionalIndices, bool):
            object.__setattr__(self, "keepPositionalIndices", False)
        if not callable(self.valueCoercer):
            object.__setattr__(self, "valueCoercer", None)

    @staticmethod
    def resolve(
        options: Union["Options", dict[str, Any], None] = None,
        argv: Sequence[str] = (),
    ) -> "Options":
        """
        Normalizes caller supplied options into an `Options`.

        Args:
            options: A dict of option fields, an `Options`, or None for the defaults.
            argv: The tokens to use when `options` does not supply any.
        """
        if isinstance(options, Options):
            if options.tokens is None:
                return options.withTokens(argv)
            return options

        raw = options if isinstance(options, dict) else {}
        tokens = raw.get("tokens")

        res = Options(
            tokens=tokens if isinstance(tokens, (list, tuple)) else tuple(argv),
            prefixes=raw.get("prefixes"),
            delimiters=raw.get("delimiters"),
            keepPositionalIndices=raw.get("keepPositionalIndices"),
            valueCoercer=raw.get("valueCoercer"),
        )
        _logger.debug(f"Resolved options {res}")
        return res

    def withTokens(self, tokens: Sequence[Any]) -> "Options":
        return dt.replace(self, tokens=tuple(tokens))
