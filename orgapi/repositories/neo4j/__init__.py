"""Neo4j repositories"""
from .organisation_repository import Neo4jOrganisationRepository
