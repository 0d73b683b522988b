# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Users API:
# - test_models.py: Pydantic model validation
# - test_user_store.py / test_sql_store.py: Store semantics and id assignment
# - test_user_service.py: Validation order and Ok/Err results
# - test_exceptions.py: Error kind mapping and error bodies
# - test_observability.py: @observed logging decorator
# - test_auth.py: Bearer token gate
# - test_users_api.py: HTTP endpoints end to end
#
# Run tests with: pytest
# =============================================================================
