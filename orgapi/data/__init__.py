"""data module"""

from .base import GraphAdapter
import logging

logger = logging.getLogger(__name__)


# Conditional imports - only import if dependencies are available
try:
    from .neo4j import Neo4jAdapter
except ImportError:
    logger.info("Neo4jAdapter not loaded - probably, missing dependencies")
    pass

try:
    from .surrealdb import SurrealDbAdapter
except ImportError:
    logger.info("SurrealDbAdapter not loaded - probably, missing dependencies")
    pass
