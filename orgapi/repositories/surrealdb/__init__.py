"""SurrealDB repositories"""
from .organisation_repository import SurrealDbOrganisationRepository
