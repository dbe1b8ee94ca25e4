"""SurrealDbOrganisationRepository class"""
from orgapi.data import SurrealDbAdapter
from orgapi.repositories.base_repository import OrganisationRepository


class SurrealDbOrganisationRepository(OrganisationRepository):
    """
    Organisation traversal written in SurrealQL.

    Graph edges are relation tables (membership->has_organisation->organisation,
    membership->has_member->person, content->mentions->person,
    organisation->sub_organisation_of->organisation). Nodes carry their labels in
    a `types` array since SurrealDB records have no label set.
    """

    STATEMENT = """
        SELECT
            { id: uuid, types: types, leiCode: lei_code, prefLabel: pref_label, labels: aliases } AS o,
            (
                SELECT
                    { id: uuid, types: types, prefLabel: pref_label, title: title,
                      changeEvents: [{ startedAt: inception_date }, { endedAt: termination_date }] } AS m,
                    (
                        SELECT VALUE { id: uuid, types: types, prefLabel: pref_label,
                                       annCount: count(<-mentions<-content) }
                        FROM $parent->has_member->person
                    )[0] AS p
                FROM $parent<-has_organisation<-membership
            ) AS m,
            (
                SELECT VALUE { id: uuid, types: types, prefLabel: pref_label }
                FROM $parent->sub_organisation_of->organisation
            )[0] AS parent,
            (
                SELECT VALUE { id: uuid, types: types, prefLabel: pref_label }
                FROM $parent<-sub_organisation_of<-organisation
            ) AS sub
        FROM organisation
        WHERE uuid = $uuid
    """

    def __init__(self, adapter: SurrealDbAdapter):
        super().__init__(adapter)
