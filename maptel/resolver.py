"""Cycle-safe chain resolution.

A renumbering table may contain cycles (a -> b -> a, or a -> a), and chains
are built by callers through repeated inserts. transform() must terminate
on any table without allocating per visited number, so cycles are detected
with the tortoise and hare algorithm before the chain is followed:

- The tortoise starts at the source, the hare one hop ahead of it.
- The hare advances one hop per step, the tortoise one hop every other step.
- If the hare reaches a terminal number (no outgoing mapping) the chain is
  finite. If the two meet, the chain loops.

A cyclic chain resolves to the source itself: there is no safe replacement,
and that is a successful outcome rather than an error.
"""

import logging
from typing import Mapping

from maptel.core.logging import log_call, log_outcome
from maptel.store import TableStore
from maptel.utils.tn_utils import validate_tel

log = logging.getLogger(__name__)


def is_cyclic(table: Mapping[str, str], tel_src: str) -> bool:
    """Check whether following mappings from tel_src loops forever.

    The loop may pass through tel_src itself or only through numbers further
    down the chain. Runs in time linear in the chain length with constant
    extra memory.

    Args:
        table: Mapping of phone number to replacement phone number.
        tel_src: Starting phone number.

    Returns:
        True if the chain never reaches a terminal number.
    """
    if tel_src not in table:
        return False

    tortoise = tel_src
    hare = table[tel_src]
    move_tortoise = False

    while hare in table and tortoise != hare:
        hare = table[hare]
        if move_tortoise:
            tortoise = table[tortoise]
        move_tortoise = not move_tortoise

    return tortoise == hare


def resolve(table: Mapping[str, str], tel_src: str) -> str:
    """Follow mappings from tel_src to the terminal number.

    Only terminates for acyclic chains; check is_cyclic() first.
    """
    result = tel_src
    while result in table:
        result = table[result]
    return result


def transform_chain(table: Mapping[str, str], tel_src: str) -> tuple[str, bool]:
    """Resolve tel_src within a single table.

    Returns:
        Tuple of (result, cyclic). result is tel_src when cyclic is True.
    """
    if is_cyclic(table, tel_src):
        return tel_src, True
    return resolve(table, tel_src), False


def transform(store: TableStore, table_id, tel_src: str) -> str:
    """Resolve the final replacement of tel_src in a table.

    Args:
        store: Store owning the table.
        table_id: Table identifier.
        tel_src: Phone number to resolve.

    Returns:
        The terminal number of the chain, or tel_src if the chain is cyclic
        or tel_src has no mapping.

    Raises:
        InvalidIdentifier: If the table does not exist.
        InvalidPhoneNumber: If tel_src is malformed.
    """
    return transform_detailed(store, table_id, tel_src)[0]


def transform_detailed(store: TableStore, table_id, tel_src: str) -> tuple[str, bool]:
    """Like transform(), also reporting whether a cycle was detected."""
    log_call(log, "transform", table_id, tel_src)
    table = store.view(table_id)
    validate_tel(tel_src)

    result, cyclic = transform_chain(table, tel_src)
    if cyclic:
        log_outcome(log, "transform", "cycle detected")
    log_outcome(log, "transform", f"{tel_src} -> {result}")
    return result, cyclic
