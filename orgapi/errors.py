"""Errors raised while retrieving and serving organisations."""

from typing import Optional


class OrganisationApiError(RuntimeError):
    """Base class for organisation retrieval failures."""


class QueryExecutionError(OrganisationApiError):
    """Raised by a graph adapter when a statement could not be executed."""


class StoreUnavailable(OrganisationApiError):
    """Raised when the graph store could not answer a read for a given uuid."""

    def __init__(self, uuid: Optional[str] = None):
        self.uuid = uuid
        if uuid is None:
            super().__init__("Error accessing Organisation datastore")
        else:
            super().__init__(f"Error accessing Organisation datastore for uuid: {uuid}")


class MultiplicityConflict(OrganisationApiError):
    """
    Raised when more than one organisation is stored under the same uuid.

    The organisation was found, it is just not unique, so ``found`` is always True.
    Callers must surface this instead of picking one of the candidates.
    """

    found = True

    def __init__(self, uuid: str, count: int):
        self.uuid = uuid
        self.count = count
        super().__init__(f"Multiple organisations found with the same uuid:{uuid} !")


class MarshalFailure(OrganisationApiError):
    """Raised when an organisation could not be serialised for the response."""
