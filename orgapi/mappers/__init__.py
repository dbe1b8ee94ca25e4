"""mappers module"""

from .identity import IdentityMapper
from .organisation_mapper import map_organisation
