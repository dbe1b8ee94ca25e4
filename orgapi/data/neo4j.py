import logging
from typing import Any, Dict, List, Optional

from neo4j import GraphDatabase, Query
from neo4j.exceptions import DriverError, Neo4jError

from orgapi.data.base import GraphAdapter
from orgapi.errors import QueryExecutionError

logger = logging.getLogger(__name__)


class Neo4jAdapter(GraphAdapter):
    """Neo4j adapter running Cypher statements through the official driver."""

    CONNECTIVITY_STATEMENT = "MATCH (x) RETURN 1 AS reachable LIMIT 1"

    def __init__(
        self,
        url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        database: Optional[str] = None,
        query_timeout: Optional[float] = None
    ):
        """Initializes a new Neo4j adapter. The driver is created once and shared by every query."""
        self._url = url
        self._database = database
        self._query_timeout = query_timeout
        auth = (username, password) if username else None
        self._driver = GraphDatabase.driver(url, auth=auth)

    def __enter__(self):
        """Sessions are opened per statement, so there is nothing to prepare."""
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """The driver outlives the context; see close()."""
        pass

    def close(self):
        """Closes the driver and its connection pool."""
        self._driver.close()

    def _build_query(self, statement: str):
        if self._query_timeout:
            return Query(statement, timeout=self._query_timeout)
        return statement

    def execute_query(self, statement: str, _vars: Dict[str, Any] = None) -> List[Dict[str, Any]]:
        """Runs a statement in its own session and returns every record as a dict."""
        if _vars is None:
            _vars = {}

        try:
            with self._driver.session(database=self._database) as session:
                result = session.run(self._build_query(statement), _vars)
                return result.data()
        except (Neo4jError, DriverError) as e:
            logger.error("Error running statement against %s: %s", self._url, e)
            raise QueryExecutionError(f"Neo4j query failed: {e}") from e

    def parse_db_response(self, response: Any) -> List[Dict[str, Any]]:
        """Records are already plain dicts; anything else means no rows."""
        if not response or not isinstance(response, list):
            return []
        return response

    def check_connectivity(self):
        """Tests neo4j by running a simple cypher query."""
        results = self.parse_db_response(self.execute_query(self.CONNECTIVITY_STATEMENT))
        logger.debug("CheckConnectivity results: %s", results)
        if not results:
            raise QueryExecutionError("Neo4j is reachable but holds no nodes")
