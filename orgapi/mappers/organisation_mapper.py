"""
Folds a raw organisation row into the Organisation aggregate.
"""
import logging
from typing import List, Optional

from orgapi.mappers.identity import IdentityMapper
from orgapi.models import ChangeEvent, Membership, Organisation, Person, RelatedOrganisation
from orgapi.repositories.rows import RawChangeEvent, RawMembershipEntry, RawNode, RawOrganisationRow

logger = logging.getLogger(__name__)


def map_change_events(raw_events: List[RawChangeEvent]) -> List[ChangeEvent]:
    """
    Rebuild change events from the projected [{startedAt}, {endedAt}] pair.

    Each populated field becomes its own event, start before end. A pair with
    nothing populated yields no events at all.
    """
    if all(not event.started_at and not event.ended_at for event in raw_events):
        return []

    events = []
    for raw_event in raw_events:
        if raw_event.started_at:
            events.append(ChangeEvent(started_at=raw_event.started_at))
        if raw_event.ended_at:
            events.append(ChangeEvent(ended_at=raw_event.ended_at))
    logger.debug("changeEvent converted: %s result: %s", raw_events, events)
    return events


def is_empty_membership_sentinel(entries: List[RawMembershipEntry]) -> bool:
    """An optional match that found no membership still projects one all-null entry."""
    return len(entries) == 1 and not entries[0].p.id


def map_membership(entry: RawMembershipEntry, identity_mapper: IdentityMapper) -> Membership:
    person_id, person_api_url, person_types = identity_mapper.map_node(entry.p.id, entry.p.types)
    return Membership(
        title=entry.m.pref_label,
        person=Person(
            id=person_id,
            api_url=person_api_url,
            types=person_types,
            pref_label=entry.p.pref_label,
        ),
        change_events=map_change_events(entry.m.change_events),
    )


def map_related_organisation(node: RawNode, identity_mapper: IdentityMapper) -> Optional[RelatedOrganisation]:
    if not node.id:
        return None
    related_id, related_api_url, related_types = identity_mapper.map_node(node.id, node.types)
    return RelatedOrganisation(
        id=related_id,
        api_url=related_api_url,
        types=related_types,
        pref_label=node.pref_label,
    )


def map_organisation(
    row: RawOrganisationRow,
    identity_mapper: IdentityMapper,
    include_related_organisations: bool = False
) -> Organisation:
    """
    Map exactly one raw row onto an Organisation.

    Parent and subsidiaries are always decoded, but only attached when
    include_related_organisations is set.
    """
    organisation_id, api_url, types = identity_mapper.map_node(row.o.id, row.o.types)

    logger.info("LENGTH of memberships: %s", len(row.m))
    if is_empty_membership_sentinel(row.m):
        memberships = []
    else:
        memberships = [map_membership(entry, identity_mapper) for entry in row.m]

    parent = map_related_organisation(row.parent, identity_mapper)
    subsidiaries = [
        related for related in (map_related_organisation(node, identity_mapper) for node in row.sub)
        if related is not None
    ]

    organisation = Organisation(
        id=organisation_id,
        api_url=api_url,
        types=types,
        lei_code=row.o.lei_code,
        pref_label=row.o.pref_label,
        labels=list(row.o.labels) if row.o.labels else None,
        memberships=memberships,
    )
    if include_related_organisations:
        organisation.parent_organisation = parent
        organisation.sub_organisations = subsidiaries or None
    else:
        logger.debug("Not attaching parent %s and %d subsidiaries to %s", parent, len(subsidiaries), organisation_id)

    logger.debug("map_organisation row: %s result: %s", row, organisation)
    return organisation
