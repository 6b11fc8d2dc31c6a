import sys
import json
import logging

from typing import Any, Union

from . import (
    args,
    coerce,
    const,
    options,
    parser,
    vt100,
)

from .args import ParsedArgs
from .coerce import Coerced, Coercer, DefaultCoercer, FunctionCoercer, coerceValue, parseValue
from .options import Options
from .parser import parse

__all__ = [
    "Coerced",
    "Coercer",
    "DefaultCoercer",
    "FunctionCoercer",
    "Options",
    "ParsedArgs",
    "coerceValue",
    "getProcessArgs",
    "main",
    "parse",
    "parseValue",
]


class logger:
    @staticmethod
    def setup(verbose: bool = False):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def getProcessArgs(opts: Union[Options, dict[str, Any], None] = None) -> ParsedArgs:
    """
    Parses the arguments this program was invoked with.

    `opts` may override any option, including the tokens themselves.
    """
    return parse(options=Options.resolve(opts, argv=sys.argv[1:]))


def main() -> int:
    try:
        logger.setup()
        result = getProcessArgs()
        print(json.dumps(result.asDict(), indent=2))
        return 0

    except KeyboardInterrupt:
        print()
        return 1
