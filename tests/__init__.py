# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Token Classifier API:
# - test_utils.py: Token coercion, numeric parsing and rendering
# - test_classifier.py: Classification, sum, concat string, de-duplication
# - test_models.py: Unit tests for Pydantic model validation
# - test_config.py: Settings defaults and environment overrides
# - test_api.py: Integration tests for API endpoints
#
# Run tests with: pytest
# =============================================================================
