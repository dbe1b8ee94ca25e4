"""
ChangeEvent model
"""

from dataclasses import dataclass, field
from typing import Optional

from .api_model import ApiModel


@dataclass(kw_only=True)
class ChangeEvent(ApiModel):
    """One endpoint of a membership's validity interval. Only one of the two fields is ever set."""

    started_at: Optional[str] = field(default=None, metadata={'alias': 'startedAt', 'omit_empty': True})
    ended_at: Optional[str] = field(default=None, metadata={'alias': 'endedAt', 'omit_empty': True})
