"""repositories module"""

from .rows import RawOrganisationRow
from .base_repository import OrganisationRepository
import logging

logger = logging.getLogger(__name__)


# Conditional imports - only import if the backend's adapter is available
try:
    from .neo4j.organisation_repository import Neo4jOrganisationRepository
except ImportError:
    logger.info("Neo4jOrganisationRepository not loaded - probably, missing dependencies")
    pass

try:
    from .surrealdb.organisation_repository import SurrealDbOrganisationRepository
except ImportError:
    logger.info("SurrealDbOrganisationRepository not loaded - probably, missing dependencies")
    pass
