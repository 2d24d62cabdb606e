"""
Core Application - Infrastructure & Base Classes

Generic, reusable building blocks with no chat-specific logic.

Models (import from core.models):
    - BaseModel: Abstract model with a creation timestamp

Model Mixins (import from core.model_mixins):
    - UUIDPrimaryKeyMixin: UUID as primary key

Services (import from core.services):
    - BaseService: Base class for service layer
    - ServiceResult: Standard result wrapper for success/failure handling

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes
    - ExternalServiceError: Failures at boundaries the application does not own

Views (import from core.views):
    - health_check: Liveness/readiness endpoint
"""
