from .organisation_service import OrganisationService
