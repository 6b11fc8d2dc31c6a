import logging

from typing import Any, Optional, Sequence, Union
from .args import ParsedArgs
from .coerce import coerceValue
from .options import Options

_logger = logging.getLogger(__name__)

# --- Scan ------------------------------------------------------------------- #


class TokenScan:
    """
    A cursor over a sequence of command-line tokens.
    """

    _toks: Sequence[str]
    _off: int

    def __init__(self, toks: Sequence[str], off: int = 0):
        self._toks = toks
        self._off = off

    def index(self) -> int:
        """Returns the index of the current token."""
        return self._off

    def curr(self) -> str:
        """
        Returns the current token.

        Returns:
            The current token, or '' if at the end of the sequence.
        """
        if self.eof():
            return ""
        return self._toks[self._off]

    def next(self) -> str:
        """
        Advances the scanner to the next token.

        Returns:
            The new current token, or '' if at the end of the sequence.
        """
        if self.eof():
            return ""

        self._off += 1
        return self.curr()

    def peek(self, off: int = 1) -> Optional[str]:
        """
        Peeks at the token `off` positions ahead of the current one.

        Returns:
            The token, or None if it is past the end of the sequence.
        """
        if self._off + off >= len(self._toks):
            return None

        return self._toks[self._off + off]

    def eof(self) -> bool:
        """Checks if the scanner is past the last token."""
        return self._off >= len(self._toks)


# --- Classification --------------------------------------------------------- #


def matchPrefix(tok: str, prefixes: Sequence[str]) -> Optional[str]:
    """Returns the first prefix, in configured order, that `tok` starts with."""
    for prefix in prefixes:
        if tok.startswith(prefix):
            return prefix
    return None


def findDelimiter(rest: str, delimiters: Sequence[str]) -> Optional[tuple[int, str]]:
    """
    Finds the delimiter occurring first in `rest`.

    Ties go to the delimiter declared first. Empty delimiters never match.

    Returns:
        The index and the delimiter, or None if no delimiter occurs.
    """
    found: Optional[tuple[int, str]] = None
    for delim in delimiters:
        if not delim:
            continue
        idx = rest.find(delim)
        if idx >= 0 and (found is None or idx < found[0]):
            found = (idx, delim)
    return found


def splitNamed(rest: str, delimiters: Sequence[str]) -> tuple[str, Optional[str]]:
    """
    Splits a named argument into its name and inline value.

    An empty inline value counts as no value, and the name is then the
    whole of `rest`.
    """
    found = findDelimiter(rest, delimiters)
    if found is None:
        return rest, None

    idx, delim = found
    value = rest[idx + len(delim) :]
    if not value:
        return rest, None
    return rest[:idx], value


# --- Parser ----------------------------------------------------------------- #


def _parseNamed(s: TokenScan, rest: str, opts: Options, res: ParsedArgs):
    name, value = splitNamed(rest, opts.delimiters)
    if value is not None:
        _logger.debug(f"Token {s.index()}: '{name}' with inline value")
        res.putOpt(name, coerceValue(name, value, opts.valueCoercer).value)
        return

    nextTok = s.peek()
    if not nextTok or matchPrefix(nextTok, opts.prefixes) is not None:
        _logger.debug(f"Token {s.index()}: '{name}' is a flag")
        res.putOpt(name, True)
        return

    _logger.debug(f"Token {s.index()}: '{name}' takes the next token as value")
    s.next()
    res.putOpt(name, coerceValue(name, nextTok, opts.valueCoercer).value)


def _parsePositional(s: TokenScan, opts: Options, res: ParsedArgs):
    idx = s.index()
    _logger.debug(f"Token {idx}: positional")
    value = coerceValue(idx, s.curr(), opts.valueCoercer).value
    res.putPositional(idx, value, opts.keepPositionalIndices)


def parse(
    tokens: Optional[Sequence[Any]] = None,
    options: Union[Options, dict[str, Any], None] = None,
) -> ParsedArgs:
    """
    Parses command-line tokens into positional and named values.

    Args:
        tokens: The tokens to parse. Takes precedence over the tokens in `options`.
        options: An `Options` or a dict of option fields.

    Returns:
        The parsed arguments. Malformed values degrade to their raw string,
        nothing raises.
    """
    opts = Options.resolve(options)
    if tokens is not None:
        opts = opts.withTokens(tokens)

    res = ParsedArgs()
    s = TokenScan(opts.tokens or ())
    while not s.eof():
        prefix = matchPrefix(s.curr(), opts.prefixes)
        if prefix is None:
            _parsePositional(s, opts, res)
        else:
            _parseNamed(s, s.curr()[len(prefix) :], opts, res)
        s.next()

    return res
