"""
Models for orgapi
"""

from .api_model import ApiModel
from .change_event import ChangeEvent
from .person import Person
from .membership import Membership
from .organisation import Organisation, RelatedOrganisation
