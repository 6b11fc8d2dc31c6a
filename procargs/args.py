import logging

from typing import Any, Iterator

from .coerce import Value

_logger = logging.getLogger(__name__)

POSITIONAL = "positional"


class ParsedArgs:
    """
    Result of a parse: positional values plus one entry per named argument.

    `args["positional"]` is always the positional list. Named arguments are
    in `opts`, including one that is itself called "positional".
    """

    opts: dict[str, Value]
    positional: list[Value]

    def __init__(self):
        self.opts = {}
        self.positional = []

    def putOpt(self, key: str, value: Value):
        if key == POSITIONAL:
            _logger.warning(f"Named argument '{POSITIONAL}' is shadowed by the positional values, it is only kept in opts")
        self.opts[key] = value

    def putPositional(self, index: int, value: Value, keepIndex: bool = False):
        if not keepIndex:
            self.positional.append(value)
            return

        if index >= len(self.positional):
            self.positional.extend([None] * (index + 1 - len(self.positional)))
        self.positional[index] = value

    def asDict(self) -> dict[str, Value]:
        return {POSITIONAL: self.positional, **{k: v for k, v in self.opts.items() if k != POSITIONAL}}

    def __getitem__(self, key: str) -> Value:
        if key == POSITIONAL:
            return self.positional
        return self.opts[key]

    def __contains__(self, key: object) -> bool:
        return key == POSITIONAL or key in self.opts

    def get(self, key: str, default: Any = None) -> Value:
        return self[key] if key in self else default

    def __iter__(self) -> Iterator[str]:
        return iter(self.asDict())

    def __len__(self) -> int:
        return len(self.asDict())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParsedArgs):
            return self.asDict() == other.asDict()
        if isinstance(other, dict):
            return self.asDict() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ParsedArgs({self.asDict()!r})"
