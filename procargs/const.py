VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"


DESCRIPTION = "Parse command-line tokens into positional and named values without a full CLI framework"

DEFAULT_PREFIXES: tuple[str, ...] = ("--", "-")
DEFAULT_DELIMITERS: tuple[str, ...] = (":", "=")
