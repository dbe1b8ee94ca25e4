"""Neo4jOrganisationRepository class"""
from typing import Any, Dict, List

from orgapi.data import Neo4jAdapter
from orgapi.repositories.base_repository import OrganisationRepository


class Neo4jOrganisationRepository(OrganisationRepository):
    """Organisation traversal written in Cypher."""

    # Every stage aggregates before the next OPTIONAL MATCH, so memberships,
    # the parent and subsidiaries never multiply each other's rows.
    STATEMENT = """
        MATCH (o:Organisation {uuid: $uuid})
        OPTIONAL MATCH (o)<-[:HAS_ORGANISATION]-(m:Membership)
        OPTIONAL MATCH (m)-[:HAS_MEMBER]->(p:Person)
        OPTIONAL MATCH (p)<-[:MENTIONS]-(c:Content)
        WITH o, m, p, count(c) AS annCount
        WITH o, collect({
            m: {id: m.uuid, types: labels(m), prefLabel: m.prefLabel, title: m.title,
                changeEvents: [{startedAt: m.inceptionDate}, {endedAt: m.terminationDate}]},
            p: {id: p.uuid, types: labels(p), prefLabel: p.prefLabel, annCount: annCount}
        }) AS m
        OPTIONAL MATCH (o)-[:SUB_ORGANISATION_OF]->(parent:Organisation)
        WITH o, m, head(collect({id: parent.uuid, types: labels(parent), prefLabel: parent.prefLabel})) AS parent
        OPTIONAL MATCH (o)<-[:SUB_ORGANISATION_OF]-(sub:Organisation)
        WITH o, m, parent, collect({id: sub.uuid, types: labels(sub), prefLabel: sub.prefLabel}) AS sub
        RETURN collect({
            o: {id: o.uuid, types: labels(o), leiCode: o.leiCode, prefLabel: o.prefLabel, labels: o.aliases},
            m: m,
            parent: parent,
            sub: sub
        }) AS rs
    """

    def __init__(self, adapter: Neo4jAdapter):
        super().__init__(adapter)

    def _process_data_from_db(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """The statement returns a single record whose `rs` list holds one entry per root organisation."""
        return [row for record in records for row in (record.get('rs') or [])]
