"""
Organisation model
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .api_model import ApiModel
from .membership import Membership


@dataclass(kw_only=True)
class RelatedOrganisation(ApiModel):
    """A parent or subsidiary reference."""

    id: str = ""
    api_url: str = field(default="", metadata={'alias': 'apiUrl'})
    types: List[str] = field(default_factory=list)
    pref_label: str = field(default="", metadata={'alias': 'prefLabel'})


@dataclass(kw_only=True)
class Organisation(ApiModel):
    """The organisation aggregate root."""

    id: str = ""
    api_url: str = field(default="", metadata={'alias': 'apiUrl'})
    types: List[str] = field(default_factory=list)
    lei_code: str = field(default="", metadata={'alias': 'leiCode', 'omit_empty': True})
    pref_label: str = field(default="", metadata={'alias': 'prefLabel'})
    labels: Optional[List[str]] = field(default=None, metadata={'omit_empty': True})
    memberships: List[Membership] = field(default_factory=list)
    # Only populated when related organisations are enabled in the service config.
    parent_organisation: Optional[RelatedOrganisation] = field(
        default=None, metadata={'alias': 'parentOrganisation', 'omit_empty': True})
    sub_organisations: Optional[List[RelatedOrganisation]] = field(
        default=None, metadata={'alias': 'subOrganisations', 'omit_empty': True})
