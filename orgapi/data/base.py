from abc import ABC, abstractmethod
from typing import Any, Dict, List


class GraphAdapter(ABC):
    """Abstract base class for graph store adapters."""

    @abstractmethod
    def __enter__(self) -> 'GraphAdapter':
        """Context manager entry point for preparing the store connection."""
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_value, traceback):
        """Context manager exit point for releasing the store connection."""
        pass

    @abstractmethod
    def execute_query(self, statement: str, _vars: Dict[str, Any] = None) -> Any:
        """Executes a parameterised statement against the store."""
        pass

    @abstractmethod
    def parse_db_response(self, response: Any) -> List[Dict[str, Any]]:
        """Parses the raw response from the store into a list of rows."""
        pass

    @abstractmethod
    def check_connectivity(self):
        """Raises QueryExecutionError unless at least one node is reachable."""
        pass

    def close(self):
        """Releases any long-lived driver held by the adapter."""
        pass
