# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic of the service:
# - models/: Pydantic schemas and Ok/Err result values
# - services/: UserService, the CRUD operation set
#
# Code in this package does not deal with HTTP requests or responses.
# =============================================================================
