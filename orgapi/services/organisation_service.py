"""OrganisationService class"""
import logging
from typing import Tuple

from orgapi.errors import MultiplicityConflict, QueryExecutionError, StoreUnavailable
from orgapi.mappers.identity import IdentityMapper
from orgapi.mappers.organisation_mapper import map_organisation
from orgapi.models import Organisation
from orgapi.repositories.base_repository import OrganisationRepository

logger = logging.getLogger(__name__)


class OrganisationService:
    """Reads one organisation aggregate per uuid. The only entry point the HTTP layer calls."""

    def __init__(
        self,
        repository: OrganisationRepository,
        identity_mapper: IdentityMapper,
        include_related_organisations: bool = False
    ):
        self.repository = repository
        self.identity_mapper = identity_mapper
        self.include_related_organisations = include_related_organisations

    def read(self, uuid: str) -> Tuple[Organisation, bool]:
        """
        Read the organisation stored under uuid.

        Args:
            uuid (str): exact key of the organisation

        Returns:
            Tuple[Organisation, bool]: the aggregate and whether it was found. When
            nothing matched the aggregate is an empty Organisation.

        Raises:
            StoreUnavailable: the graph store could not run the traversal.
            MultiplicityConflict: more than one organisation is stored under uuid.
        """
        logger.info("Entered READ for uuid=%s", uuid)
        try:
            rows = self.repository.find_by_uuid(uuid)
        except QueryExecutionError as e:
            logger.error("Error looking up uuid %s: %s", uuid, e)
            raise StoreUnavailable(uuid) from e

        if not rows:
            return Organisation(), False
        if len(rows) > 1:
            conflict = MultiplicityConflict(uuid, len(rows))
            logger.error(str(conflict))
            raise conflict

        organisation = map_organisation(rows[0], self.identity_mapper, self.include_related_organisations)
        logger.debug("Returning %s", organisation)
        return organisation, True

    def check_connectivity(self):
        """Raises StoreUnavailable unless the graph store answers a trivial query."""
        try:
            self.repository.check_connectivity()
        except QueryExecutionError as e:
            raise StoreUnavailable() from e
