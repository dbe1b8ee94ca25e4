from enum import Enum


class GraphBackend(str, Enum):
    NEO4J = 'neo4j'
    SURREALDB = 'surrealdb'

    def __str__(self):
        return str(self.value)
