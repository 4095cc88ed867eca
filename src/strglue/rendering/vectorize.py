"""Broadcasting rules for vectorized rendering."""

import math
import warnings
from itertools import combinations
from typing import List, Sequence

from strglue.errors import BroadcastError, BroadcastWarning
from strglue.global_models import BroadcastPolicy


def broadcast_length(
    lengths: Sequence[int], policy: BroadcastPolicy = BroadcastPolicy.RECYCLE
) -> int:
    """Compute the number of output rows for the given vector lengths.

    Any zero length gives zero rows. Length-1 vectors broadcast to any
    length. Otherwise the row count is the least common multiple of the
    remaining lengths.

    Under ``RECYCLE``, lengths that are not multiples of one another are
    cycled and a BroadcastWarning is emitted. Under ``STRICT``, every
    length must be 1 or the same n.

    Raises:
        BroadcastError: If lengths differ under the strict policy.

    Example:
        >>> broadcast_length([1, 3, 3])
        3
        >>> broadcast_length([2, 4])
        4
    """
    if any(length == 0 for length in lengths):
        return 0

    non_unit = sorted({length for length in lengths if length != 1})
    if not non_unit:
        return 1

    if policy == BroadcastPolicy.STRICT and len(non_unit) > 1:
        raise BroadcastError(
            f"Vector lengths {non_unit} cannot be broadcast: "
            f"each must be 1 or {non_unit[-1]}"
        )

    uneven = [(a, b) for a, b in combinations(non_unit, 2) if b % a != 0]
    if uneven:
        a, b = uneven[0]
        warnings.warn(
            f"Vector lengths {a} and {b} are not multiples of each other; "
            "shorter vectors are recycled",
            BroadcastWarning,
            stacklevel=3,
        )

    return math.lcm(*non_unit)


def recycle(pieces: Sequence[Sequence[str]], rows: int) -> List[str]:
    """Join one element of every piece per row, cycling shorter pieces.

    Example:
        >>> recycle([["x="], ["1", "2"]], 2)
        ['x=1', 'x=2']
    """
    return [
        "".join(piece[row % len(piece)] for piece in pieces) for row in range(rows)
    ]
