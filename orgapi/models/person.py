"""
Person model
"""

from dataclasses import dataclass, field
from typing import List

from .api_model import ApiModel


@dataclass(kw_only=True)
class Person(ApiModel):
    """A person holding a membership."""

    id: str = ""
    api_url: str = field(default="", metadata={'alias': 'apiUrl'})
    types: List[str] = field(default_factory=list)
    pref_label: str = field(default="", metadata={'alias': 'prefLabel'})
