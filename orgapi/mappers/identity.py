"""
Identity / URL mapping for graph nodes.

Turns a raw node uuid and its label set into the canonical identifier, the API URL
and the ordered list of ontology type URIs.
"""

from typing import Iterable, List, Optional, Tuple

DEFAULT_API_BASE_URL = "http://api.ft.com"

# label -> parent label
PARENT_TYPES = {
    'Thing': None,
    'Concept': 'Thing',
    'Classification': 'Concept',
    'Brand': 'Classification',
    'Genre': 'Classification',
    'Section': 'Classification',
    'SpecialReport': 'Classification',
    'Subject': 'Classification',
    'Location': 'Concept',
    'Topic': 'Concept',
    'Person': 'Concept',
    'Membership': 'Concept',
    'Role': 'Concept',
    'MembershipRole': 'Role',
    'BoardRole': 'MembershipRole',
    'Organisation': 'Concept',
    'Company': 'Organisation',
    'PublicCompany': 'Company',
    'PrivateCompany': 'Company',
}

TYPE_URIS = {
    'Thing': 'http://www.ft.com/ontology/core/Thing',
    'Concept': 'http://www.ft.com/ontology/concept/Concept',
    'Classification': 'http://www.ft.com/ontology/classification/Classification',
    'Brand': 'http://www.ft.com/ontology/product/Brand',
    'Genre': 'http://www.ft.com/ontology/Genre',
    'Section': 'http://www.ft.com/ontology/Section',
    'SpecialReport': 'http://www.ft.com/ontology/SpecialReport',
    'Subject': 'http://www.ft.com/ontology/Subject',
    'Location': 'http://www.ft.com/ontology/Location',
    'Topic': 'http://www.ft.com/ontology/Topic',
    'Person': 'http://www.ft.com/ontology/person/Person',
    'Membership': 'http://www.ft.com/ontology/organisation/Membership',
    'Role': 'http://www.ft.com/ontology/organisation/Role',
    'MembershipRole': 'http://www.ft.com/ontology/MembershipRole',
    'BoardRole': 'http://www.ft.com/ontology/BoardRole',
    'Organisation': 'http://www.ft.com/ontology/organisation/Organisation',
    'Company': 'http://www.ft.com/ontology/company/Company',
    'PublicCompany': 'http://www.ft.com/ontology/company/PublicCompany',
    'PrivateCompany': 'http://www.ft.com/ontology/company/PrivateCompany',
}

# most specific label -> API collection
API_PATHS = {
    'Organisation': 'organisations',
    'Company': 'organisations',
    'PublicCompany': 'organisations',
    'PrivateCompany': 'organisations',
    'Person': 'people',
    'Brand': 'brands',
    'Membership': 'memberships',
}

THINGS_PATH = 'things'


def type_depth(label: str) -> int:
    depth = 0
    parent = PARENT_TYPES[label]
    while parent is not None:
        depth += 1
        parent = PARENT_TYPES[parent]
    return depth


def known_types(labels: Optional[Iterable[str]]) -> List[str]:
    """Known labels, ordered from the most general to the most specific. Unknown labels are dropped."""
    unique = {label for label in (labels or []) if label in PARENT_TYPES}
    return sorted(unique, key=lambda label: (type_depth(label), label))


def most_specific_type(labels: Optional[Iterable[str]]) -> Optional[str]:
    ordered = known_types(labels)
    return ordered[-1] if ordered else None


class IdentityMapper:
    """Pure mapping of raw node identifiers onto canonical identifiers and URLs."""

    def __init__(self, api_base_url: str = DEFAULT_API_BASE_URL):
        self.api_base_url = api_base_url.rstrip('/')

    def id_url(self, uuid: str) -> str:
        """The canonical identifier for a node."""
        return f"{self.api_base_url}/{THINGS_PATH}/{uuid}"

    def api_url(self, uuid: str, labels: Optional[Iterable[str]]) -> str:
        """The API URL for a node, pointing at the collection of its most specific type."""
        path = API_PATHS.get(most_specific_type(labels), THINGS_PATH)
        return f"{self.api_base_url}/{path}/{uuid}"

    def type_uris(self, labels: Optional[Iterable[str]]) -> List[str]:
        return [TYPE_URIS[label] for label in known_types(labels)]

    def map_node(self, uuid: str, labels: Optional[Iterable[str]]) -> Tuple[str, str, List[str]]:
        """
        Map a node in one go.

        Returns:
            (canonical identifier, API URL, ordered type URIs)
        """
        return self.id_url(uuid), self.api_url(uuid, labels), self.type_uris(labels)
