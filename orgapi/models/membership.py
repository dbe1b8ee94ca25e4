"""
Membership model
"""

from dataclasses import dataclass, field
from typing import List

from .api_model import ApiModel
from .change_event import ChangeEvent
from .person import Person


@dataclass(kw_only=True)
class Membership(ApiModel):
    """A person's membership of an organisation."""

    title: str = ""
    person: Person = field(default_factory=Person)
    change_events: List[ChangeEvent] = field(default_factory=list,
                                             metadata={'alias': 'changeEvents', 'omit_empty': True})
