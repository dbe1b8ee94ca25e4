from typing import Callable, Dict, Tuple

from orgapi.config import GraphBackend, ServiceConfig
from orgapi.data.base import GraphAdapter

from .base_repository import OrganisationRepository

AdapterBuilder = Callable[[ServiceConfig], GraphAdapter]
RepositoryBuilder = Callable[[GraphAdapter], OrganisationRepository]


def build_neo4j_adapter(config: ServiceConfig) -> GraphAdapter:
    from orgapi.data.neo4j import Neo4jAdapter

    return Neo4jAdapter(
        url=config.NEO4J_URL,
        username=config.NEO4J_USER,
        password=config.NEO4J_PASSWORD,
        database=config.NEO4J_DATABASE,
        query_timeout=config.NEO4J_QUERY_TIMEOUT,
    )


def build_surrealdb_adapter(config: ServiceConfig) -> GraphAdapter:
    from orgapi.data.surrealdb import SurrealDbAdapter

    return SurrealDbAdapter(
        endpoint=config.SURREAL_ENDPOINT,
        username=config.SURREAL_USER,
        password=config.SURREAL_PASSWORD,
        namespace=config.SURREAL_NAMESPACE,
        db_name=config.SURREAL_DATABASE,
    )


class OrganisationRepositoryFactory:
    def __init__(self):
        self._repositories: Dict[GraphBackend, Tuple[RepositoryBuilder, AdapterBuilder]] = {}

    def register_repository(self, key: GraphBackend, repository_builder: RepositoryBuilder,
                            adapter_builder: AdapterBuilder):
        self._repositories[key] = (repository_builder, adapter_builder)

    def get(self, config: ServiceConfig) -> OrganisationRepository:
        key = config.GRAPH_BACKEND
        if key not in self._repositories:
            raise ValueError(f"No repository registered for graph backend {key}")

        repository_builder, adapter_builder = self._repositories[key]
        return repository_builder(adapter_builder(config))


def _neo4j_repository(adapter):
    from orgapi.repositories.neo4j import Neo4jOrganisationRepository
    return Neo4jOrganisationRepository(adapter)


def _surrealdb_repository(adapter):
    from orgapi.repositories.surrealdb import SurrealDbOrganisationRepository
    return SurrealDbOrganisationRepository(adapter)


repository_factory = OrganisationRepositoryFactory()

repository_factory.register_repository(key=GraphBackend.NEO4J, repository_builder=_neo4j_repository,
                                       adapter_builder=build_neo4j_adapter)
repository_factory.register_repository(key=GraphBackend.SURREALDB, repository_builder=_surrealdb_repository,
                                       adapter_builder=build_surrealdb_adapter)
