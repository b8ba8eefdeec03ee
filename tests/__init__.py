# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the FileAI API:
# - test_validation.py: Login/signup form validation
# - test_models.py: Pydantic models and page content
# - test_auth_service.py / test_auth_flow.py: Identity provider and form flows
# - test_storage_service.py / test_profile_service.py: Supabase-backed services
# - test_provisioning.py: Index provisioning (function and caller)
# - test_routes.py: HTTP routes through TestClient
# - test_tasks.py: Celery reconciliation task
#
# Run tests with: pytest
# =============================================================================
