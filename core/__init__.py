# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the HTTP layer:
# - models/: Pydantic schemas for forms, profiles, pages and flow results
# - services/: Auth gateway, storage, provisioning, profiles, signup flow
# - validation.py: Login/signup form validation
# - site_content.py: Landing, auth and dashboard page content
#
# Code in this package should not define routes. Route handlers in app/
# call into it.
# =============================================================================
