"""
Raw rows returned by the organisation traversal.

These mirror the projection of the graph query, not the API models. Graph stores
return nulls for every property of an optional match that found nothing; those
are normalised to empty strings and empty lists here so the mapper only ever
deals with one notion of "absent".
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _list(data: Dict[str, Any], key: str) -> list:
    value = data.get(key)
    return list(value) if value else []


@dataclass
class RawNode:
    """Identity fields shared by every projected node."""

    id: str = ""
    types: List[str] = field(default_factory=list)
    pref_label: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RawNode":
        data = data or {}
        return cls(id=_text(data, 'id'), types=_list(data, 'types'), pref_label=_text(data, 'prefLabel'))


@dataclass
class RawOrganisationNode(RawNode):
    lei_code: str = ""
    labels: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RawOrganisationNode":
        data = data or {}
        return cls(
            id=_text(data, 'id'),
            types=_list(data, 'types'),
            pref_label=_text(data, 'prefLabel'),
            lei_code=_text(data, 'leiCode'),
            labels=_list(data, 'labels'),
        )


@dataclass
class RawPersonNode(RawNode):
    # number of content nodes mentioning the person
    ann_count: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RawPersonNode":
        data = data or {}
        return cls(
            id=_text(data, 'id'),
            types=_list(data, 'types'),
            pref_label=_text(data, 'prefLabel'),
            ann_count=int(data.get('annCount') or 0),
        )


@dataclass
class RawChangeEvent:
    started_at: str = ""
    ended_at: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RawChangeEvent":
        data = data or {}
        return cls(started_at=_text(data, 'startedAt'), ended_at=_text(data, 'endedAt'))


@dataclass
class RawMembershipNode(RawNode):
    title: str = ""
    # always projected as a [{startedAt}, {endedAt}] pair
    change_events: List[RawChangeEvent] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RawMembershipNode":
        data = data or {}
        return cls(
            id=_text(data, 'id'),
            types=_list(data, 'types'),
            pref_label=_text(data, 'prefLabel'),
            title=_text(data, 'title'),
            change_events=[RawChangeEvent.from_dict(event) for event in _list(data, 'changeEvents')],
        )


@dataclass
class RawMembershipEntry:
    m: RawMembershipNode = field(default_factory=RawMembershipNode)
    p: RawPersonNode = field(default_factory=RawPersonNode)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RawMembershipEntry":
        data = data or {}
        return cls(m=RawMembershipNode.from_dict(data.get('m')), p=RawPersonNode.from_dict(data.get('p')))


@dataclass
class RawOrganisationRow:
    """One root organisation with everything the traversal gathered around it."""

    o: RawOrganisationNode = field(default_factory=RawOrganisationNode)
    m: List[RawMembershipEntry] = field(default_factory=list)
    parent: RawNode = field(default_factory=RawNode)
    sub: List[RawNode] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawOrganisationRow":
        return cls(
            o=RawOrganisationNode.from_dict(data.get('o')),
            m=[RawMembershipEntry.from_dict(entry) for entry in _list(data, 'm')],
            parent=RawNode.from_dict(data.get('parent')),
            sub=[RawNode.from_dict(node) for node in _list(data, 'sub')],
        )
