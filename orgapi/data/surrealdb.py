import logging
import threading
from typing import Any, Dict, List, Optional

from surrealdb import Surreal

from orgapi.data.base import GraphAdapter
from orgapi.errors import QueryExecutionError

logger = logging.getLogger(__name__)


class SurrealDbAdapter(GraphAdapter):
    """SurrealDB adapter for graph traversals over record links."""

    CONNECTIVITY_STATEMENT = "SELECT id FROM organisation LIMIT 1"

    def __init__(
        self, endpoint: str, username: Optional[str], password: Optional[str], namespace: str, db_name: str
    ):
        """Initializes a new SurrealDB adapter. Embedded endpoints such as mem:// need no credentials."""
        self._endpoint = endpoint
        self._username = username
        self._password = password
        self._namespace = namespace
        self._db_name = db_name
        # one connection per thread, opened by the outermost __enter__
        self._local = threading.local()

    @property
    def _db(self):
        return getattr(self._local, 'db', None)

    def __enter__(self):
        """Context manager entry point for preparing DB connection. Nested entries reuse it."""
        depth = getattr(self._local, 'depth', 0)
        if depth == 0:
            try:
                self._local.db = self._prepare_db()
            except Exception as e:
                raise QueryExecutionError(f"Could not connect to SurrealDB at {self._endpoint}: {e}") from e
        self._local.depth = depth + 1
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Context manager exit point for closing DB connection."""
        self._local.depth -= 1
        if self._local.depth > 0:
            return
        db = self._db
        self._local.db = None
        if db is not None:
            db.close()

    def _prepare_db(self):
        """Prepares the DB connection."""
        db = Surreal(self._endpoint)
        if self._username:
            db.signin({"username": self._username, "password": self._password})
        db.use(self._namespace, self._db_name)
        return db

    def _call_db(self, function_name, *args, **kwargs):
        """Calls a function specified by function_name argument in SurrealDB connection passing forward args and kwargs."""
        if not self._db:
            raise ConnectionError("No connection to SurrealDB.")
        return getattr(self._db, function_name)(*args, **kwargs)

    def execute_query(self, statement, _vars=None):
        """Executes a query against the DB."""
        if _vars is None:
            _vars = {}

        try:
            return self._call_db('query', statement, _vars)
        except Exception as e:
            logger.error("Error running statement against %s: %s", self._endpoint, e)
            raise QueryExecutionError(f"SurrealDB query failed: {e}") from e

    def parse_db_response(self, response: Any) -> List[Dict[str, Any]]:
        """
        Parse the response from SurrealDB into a list of rows.

        The blocking SDK returns the records of the statement directly. Responses
        still wrapped in per-statement {"result": [...], "status": ...} envelopes
        are unwrapped to the first statement's records.
        """
        if not response:
            return []
        if isinstance(response, dict):
            return [response]
        if not isinstance(response, list):
            return []

        first = response[0]
        if isinstance(first, dict) and 'result' in first and 'status' in first:
            results = first.get('result') or []
            return results if isinstance(results, list) else [results]
        return response

    def check_connectivity(self):
        """Tests SurrealDB by fetching a single organisation record."""
        results = self.parse_db_response(self.execute_query(self.CONNECTIVITY_STATEMENT))
        logger.debug("CheckConnectivity results: %s", results)
        if not results:
            raise QueryExecutionError("SurrealDB is reachable but holds no organisations")
