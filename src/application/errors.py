from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class MotherNotFound(NotFound):
    code = "mother_not_found"


class LitterNotFound(NotFound):
    code = "litter_not_found"


class OffspringNotFound(NotFound):
    code = "offspring_not_found"


class ReportNotFound(NotFound):
    code = "report_not_found"


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422


class InvalidRange(ValidationError):
    code = "invalid_range"


class UnknownTarget(AppError):
    code = "unknown_target"
    status_code = 422


class ConflictError(AppError):
    code = "conflict"
    status_code = 409


class DuplicateMother(ConflictError):
    code = "duplicate_mother"


class DuplicateLitter(ConflictError):
    code = "duplicate_litter"


class DuplicateOffspring(ConflictError):
    code = "duplicate_offspring"


class ReportNameConflict(ConflictError):
    code = "report_name_conflict"


class InvalidStateError(AppError):
    code = "invalid_state"
    status_code = 409


class NotAlive(InvalidStateError):
    code = "not_alive"


class AlreadyWeaned(InvalidStateError):
    code = "already_weaned"


class AlreadyDeceased(InvalidStateError):
    code = "already_deceased"


class ServiceUnavailable(AppError):
    code = "service_unavailable"
    status_code = 503


class MisconfiguredCredential(ServiceUnavailable):
    code = "misconfigured_credential"


class InvalidClassificationResponse(AppError):
    code = "invalid_classification_response"
    status_code = 502


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500
