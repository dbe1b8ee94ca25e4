"""
Shared pytest fixtures.
"""

import pytest

from orgapi.repositories.rows import RawOrganisationRow

from graph_records import membership_record, organisation_record


@pytest.fixture
def make_membership():
    return membership_record


@pytest.fixture
def make_record():
    return organisation_record


@pytest.fixture
def make_row():
    def _make_row(**kwargs) -> RawOrganisationRow:
        return RawOrganisationRow.from_dict(organisation_record(**kwargs))
    return _make_row
