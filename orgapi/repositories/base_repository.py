"""
base repository for orgapi
"""
import logging
from typing import Any, Dict, List

from orgapi.data.base import GraphAdapter
from orgapi.repositories.rows import RawOrganisationRow

logger = logging.getLogger(__name__)


class OrganisationRepository:
    """
    Runs the organisation traversal for one uuid and returns its raw rows.

    Subclasses provide the backend specific STATEMENT and reshape what their
    adapter returns through _process_data_from_db.
    """

    STATEMENT: str = None

    def __init__(self, adapter: GraphAdapter):
        self.adapter = adapter

    def _execute_within_context(
        self,
        func,
        *args,
        **kwargs
    ):
        """Utility method to execute adapter methods within the context manager."""
        with self.adapter:
            return func(*args, **kwargs)

    def _process_data_from_db(
        self,
        records: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """Hook to turn adapter records into one dict per root organisation (can be overridden by subclass)."""
        return records

    def find_by_uuid(self, uuid: str) -> List[RawOrganisationRow]:
        """
        Runs the traversal for a uuid.

        :param uuid: exact key of the root organisation
        :return: one raw row per matching root organisation, empty when nothing matched
        :raises QueryExecutionError: when the store could not run the statement
        """
        response = self._execute_within_context(
            self.adapter.execute_query,
            self.STATEMENT,
            {"uuid": uuid}
        )
        records = self._process_data_from_db(self.adapter.parse_db_response(response))
        logger.debug("Raw rows for uuid: %s were: %s", uuid, records)
        return [RawOrganisationRow.from_dict(record) for record in records]

    def check_connectivity(self):
        """Raises QueryExecutionError unless the store answers a trivial query."""
        self._execute_within_context(self.adapter.check_connectivity)
