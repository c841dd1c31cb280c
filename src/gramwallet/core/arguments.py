"""Command line argument decoding, filtering and parsing."""

import logging
from typing import Iterable, List, Optional, Sequence, Union

from .models import FilteredArguments

logger = logging.getLogger(__name__)

# Only the executable path is forwarded to the UI runtime for now.
FORWARD_ARGUMENT_COUNT = 1
URL_DELIMITER = "--"

RawArgument = Union[str, bytes]


def decode_argument(raw: RawArgument) -> str:
    """Decode one raw argument as UTF-8, replacing invalid sequences."""
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    # Python keeps undecodable bytes of sys.argv as lone surrogates
    try:
        data = raw.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        data = raw.encode("utf-8", errors="replace")
    return data.decode("utf-8", errors="replace")


def read_arguments(argv: Iterable[RawArgument]) -> List[str]:
    """Decode the whole argument vector, keeping order."""
    return [decode_argument(argument) for argument in argv]


def filter_arguments(argv: Sequence[RawArgument],
                     capacity: int = FORWARD_ARGUMENT_COUNT) -> FilteredArguments:
    """Keep only the first ``capacity`` arguments of the raw vector.

    The underlying runtime must not see user supplied arguments such as a
    deep link, so everything past the executable path is dropped.
    """
    capacity = max(capacity, 0)
    count = min(max(len(argv), 0), capacity)
    values = tuple(
        argument if isinstance(argument, str) else decode_argument(argument)
        for argument in argv[:count]
    )
    return FilteredArguments(values=values, capacity=capacity)


def parse_opened_url(arguments: Iterable[str]) -> Optional[str]:
    """Return the last argument after the first ``--`` token, if any.

    Every argument following ``--`` overwrites the previous candidate, so
    ``app -- first second`` opens ``second``.
    """
    opened = None
    next_url = False
    for argument in arguments:
        if next_url:
            opened = argument
        elif argument == URL_DELIMITER:
            next_url = True
    if opened is not None:
        logger.debug(f"Opened resource from arguments: {opened}")
    return opened
