"""Table Store for renumbering tables.

Owns every mapping table and hands out table identifiers. Identifiers come
from a counter starting at 0 and are never reused, so a deleted identifier
can never resolve to a newer, unrelated table.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from maptel.core.exceptions import InvalidIdentifier
from maptel.core.logging import log_call, log_outcome
from maptel.utils.tn_utils import validate_tel

log = logging.getLogger(__name__)

MappingTable = Dict[str, str]


class TableStore:
    """Store for renumbering tables.

    Tables are only reachable through the store's operations; read access
    returns copies or read-only views, never the mutable table.
    """

    def __init__(self):
        self._tables: Dict[int, MappingTable] = {}
        self._next_id = 0

    def __contains__(self, table_id) -> bool:
        return self.contains(table_id)

    def __len__(self) -> int:
        return len(self._tables)

    def contains(self, table_id) -> bool:
        """Check if a table with this identifier exists."""
        try:
            return table_id in self._tables
        except TypeError:
            # unhashable identifier
            return False

    def create(self) -> int:
        """Create a new empty table.

        Returns:
            The identifier of the new table
        """
        log_call(log, "create")
        table_id = self._next_id
        self._tables[table_id] = {}
        self._next_id += 1
        log_outcome(log, "create", f"new map id = {table_id}")
        return table_id

    def delete(self, table_id) -> bool:
        """Delete a table and all its entries.

        Args:
            table_id: Table identifier

        Returns:
            True if deleted, False if no such table
        """
        log_call(log, "delete", table_id)
        if not self.contains(table_id):
            log.warning(
                f"delete: no table with id {table_id}, nothing to delete",
                extra={"operation": "delete", "table_id": table_id},
            )
            return False

        del self._tables[table_id]
        log_outcome(log, "delete", f"map {table_id} deleted")
        return True

    def insert(self, table_id, tel_src: str, tel_dst: str) -> None:
        """Map tel_src to tel_dst in a table, overwriting any previous mapping.

        Args:
            table_id: Table identifier
            tel_src: Phone number to renumber
            tel_dst: Replacement phone number

        Raises:
            InvalidIdentifier: If the table does not exist
            InvalidPhoneNumber: If either number is malformed
        """
        log_call(log, "insert", table_id, tel_src, tel_dst)
        table = self._table(table_id)
        validate_tel(tel_src)
        validate_tel(tel_dst)

        table[tel_src] = tel_dst
        log_outcome(log, "insert", "inserted")

    def erase(self, table_id, tel_src: str) -> bool:
        """Remove the mapping for tel_src from a table.

        Args:
            table_id: Table identifier
            tel_src: Phone number whose mapping is removed

        Returns:
            True if erased, False if tel_src had no mapping

        Raises:
            InvalidIdentifier: If the table does not exist
            InvalidPhoneNumber: If tel_src is malformed
        """
        log_call(log, "erase", table_id, tel_src)
        table = self._table(table_id)
        validate_tel(tel_src)

        if tel_src not in table:
            log_outcome(log, "erase", "nothing to erase")
            return False

        del table[tel_src]
        log_outcome(log, "erase", "erased")
        return True

    def get(self, table_id, tel_src: str) -> Optional[str]:
        """Get the direct replacement of tel_src, one hop only.

        Returns:
            The mapped number if present, None otherwise
        """
        table = self._table(table_id)
        validate_tel(tel_src)
        return table.get(tel_src)

    def entries(self, table_id) -> MappingTable:
        """Get a copy of all mappings in a table."""
        return dict(self._table(table_id))

    def view(self, table_id) -> Mapping[str, str]:
        """Get a read-only view of a table for chain traversal."""
        return MappingProxyType(self._table(table_id))

    def list_ids(self) -> List[int]:
        """List identifiers of all live tables in creation order."""
        return sorted(self._tables)

    def _table(self, table_id) -> MappingTable:
        if not self.contains(table_id):
            raise InvalidIdentifier.unknown(table_id)
        return self._tables[table_id]
