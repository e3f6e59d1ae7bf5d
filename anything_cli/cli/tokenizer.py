"""
Flag/Query Tokenizer.

Turns command-line tokens into request parts:

    split_arguments(["users", "list", "--limit", "10", "-v"])
        -> (["users", "list"], ["--limit", "10", "-v"])

    tokenize(["--limit", "10", "-v"])
        -> {"limit": "10", "v": "true"}

Both functions are total: any list of strings is accepted.
"""

from collections.abc import Sequence

FLAG_TRUE = "true"


def _takes_value(tokens: Sequence[str], index: int) -> bool:
    """True when the token after ``index`` exists and is not itself a flag."""
    return index + 1 < len(tokens) and not tokens[index + 1].startswith("-")


def split_arguments(tokens: Sequence[str]) -> tuple[list[str], list[str]]:
    """
    Separate positional command segments from flag tokens.

    A ``--key`` token carries the following token along with it when that
    token does not start with ``-``. ``--key=value`` and ``-abc`` stand
    alone, so ``--env=prod deploy`` keeps ``deploy`` as a command segment
    instead of swallowing it as an unused value.

    Returns:
        Tuple of (commands, flags), each in input order.
    """
    commands: list[str] = []
    flags: list[str] = []

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.startswith("--"):
            flags.append(token)
            if "=" not in token and _takes_value(tokens, i):
                i += 1
                flags.append(tokens[i])
        elif token.startswith("-"):
            flags.append(token)
        else:
            commands.append(token)
        i += 1

    return commands, flags


def tokenize(tokens: Sequence[str]) -> dict[str, str]:
    """
    Parse flag tokens into a parameter map.

    - ``--key=value`` sets key to value (split on the first ``=``, value may be empty)
    - ``--key value`` sets key to value when value does not start with ``-``
    - ``--key`` otherwise sets key to "true"
    - ``-abc`` sets a, b and c to "true"
    - anything else is ignored

    A repeated key keeps its last value.
    """
    params: dict[str, str] = {}

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.startswith("--"):
            key, sep, value = token[2:].partition("=")
            if sep:
                params[key] = value
            elif _takes_value(tokens, i):
                i += 1
                params[key] = tokens[i]
            else:
                params[key] = FLAG_TRUE
        elif token.startswith("-"):
            for flag in token[1:]:
                params[flag] = FLAG_TRUE
        i += 1

    return params
