"""
Shared configuration for graph store integration tests.

This module provides:
- Store configurations from environment variables
- The organisation graph every integration test seeds, described once
"""

import os
from uuid import uuid4

import pytest

from orgapi.mappers.identity import IdentityMapper
from orgapi.services import OrganisationService


def get_neo4j_config():
    """
    Neo4j config from environment variables.

    Required env vars:
    - NEO4J_TEST_URL
    - NEO4J_TEST_USER
    - NEO4J_TEST_PASSWORD

    Optional env vars:
    - NEO4J_TEST_DATABASE

    Returns None if any required env var is missing.
    """
    required_vars = ['NEO4J_TEST_URL', 'NEO4J_TEST_USER', 'NEO4J_TEST_PASSWORD']
    if not all(os.getenv(var) for var in required_vars):
        return None

    return {
        'url': os.getenv('NEO4J_TEST_URL'),
        'username': os.getenv('NEO4J_TEST_USER'),
        'password': os.getenv('NEO4J_TEST_PASSWORD'),
        'database': os.getenv('NEO4J_TEST_DATABASE') or None,
    }


def get_surrealdb_config():
    """
    SurrealDB config from environment variables.

    Env vars:
    - SURREALDB_TEST_ENDPOINT (default: mem://, the embedded in-memory engine)
    - SURREALDB_TEST_USER
    - SURREALDB_TEST_PASSWORD
    - SURREALDB_TEST_NAMESPACE (default: orgapi_test)
    - SURREALDB_TEST_DATABASE (default: orgapi_test)

    Without an endpoint the embedded engine is used, which needs no credentials.
    """
    endpoint = os.getenv('SURREALDB_TEST_ENDPOINT')
    if not endpoint:
        return {
            'endpoint': 'mem://',
            'username': None,
            'password': None,
            'namespace': 'orgapi_test',
            'database': 'orgapi_test',
        }

    return {
        'endpoint': endpoint,
        'username': os.getenv('SURREALDB_TEST_USER'),
        'password': os.getenv('SURREALDB_TEST_PASSWORD'),
        'namespace': os.getenv('SURREALDB_TEST_NAMESPACE', 'orgapi_test'),
        'database': os.getenv('SURREALDB_TEST_DATABASE', 'orgapi_test'),
    }


@pytest.fixture
def graph_uuids():
    """
    Fresh keys for one seeded graph:

    - root: Acme Holdings plc, three memberships, a parent and two subsidiaries
    - lonely: an organisation with no relations at all
    - duplicate: a key shared by two organisations
    - missing: a key that is never seeded
    """
    return {name: str(uuid4()) for name in (
        'root', 'lonely', 'duplicate', 'missing', 'parent', 'sub_uk', 'sub_us',
        'chair', 'ceo', 'director', 'jane', 'john', 'alex',
    )}


@pytest.fixture
def service_factory():
    def _service(repository):
        return OrganisationService(repository, IdentityMapper(), include_related_organisations=True)
    return _service


ROOT_LEI_CODE = "5493001KJTIIGC8Y1R12"
ROOT_ALIASES = ["Acme", "Acme plc"]


def assert_root_rows(rows, uuids):
    """The traversal returns one row for the root with every relation gathered once."""
    assert len(rows) == 1
    row = rows[0]
    assert row.o.id == uuids['root']
    assert row.o.pref_label == "Acme Holdings plc"
    assert row.o.lei_code == ROOT_LEI_CODE
    assert row.o.labels == ROOT_ALIASES

    assert len(row.m) == 3
    people = {entry.p.id: entry for entry in row.m}
    assert set(people) == {uuids['jane'], uuids['john'], uuids['alex']}
    assert people[uuids['jane']].p.ann_count == 2
    assert people[uuids['john']].p.ann_count == 0
    assert people[uuids['jane']].m.pref_label == "Chairman"

    assert row.parent.id == uuids['parent']
    assert {sub.id for sub in row.sub} == {uuids['sub_uk'], uuids['sub_us']}


def assert_root_organisation(organisation, uuids):
    """The aggregate built from the seeded root, with related organisations attached."""
    assert organisation.id == f"http://api.ft.com/things/{uuids['root']}"
    assert organisation.api_url == f"http://api.ft.com/organisations/{uuids['root']}"
    assert organisation.types[-1] == "http://www.ft.com/ontology/company/Company"
    assert organisation.lei_code == ROOT_LEI_CODE
    assert organisation.labels == ROOT_ALIASES

    memberships = {membership.title: membership for membership in organisation.memberships}
    assert set(memberships) == {"Chairman", "Chief Executive", "Director"}
    assert memberships["Chairman"].person.pref_label == "Jane Doe"
    assert memberships["Chairman"].person.api_url == f"http://api.ft.com/people/{uuids['jane']}"
    assert [event.as_dict() for event in memberships["Chairman"].change_events] == [
        {"startedAt": "2001-01-01"}, {"endedAt": "2010-06-30"},
    ]
    assert [event.as_dict() for event in memberships["Chief Executive"].change_events] == [
        {"startedAt": "2005-03-01"},
    ]
    assert memberships["Director"].change_events == []
    assert "changeEvents" not in memberships["Director"].as_dict()

    assert organisation.parent_organisation.pref_label == "Acme Group"
    assert {sub.pref_label for sub in organisation.sub_organisations} == {"Acme UK", "Acme US"}
