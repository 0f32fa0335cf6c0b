# ============================================================================
# src/clinical_validation/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the clinical validation core.

Three families:
- configuration / infrastructure errors propagate to the caller
- provider errors are absorbed by the fallback chain; only
  AllProvidersFailedError surfaces (callers map it to a 503)
- response validation errors never leave process_llm_response
"""

from typing import List, Sequence, Tuple


class ClinicalValidationError(Exception):
    """Base exception for all clinical validation errors."""
    pass


class ConfigurationError(ClinicalValidationError):
    """Invalid or missing configuration (credentials, providers, templates)."""
    pass


class PromptTemplateNotFoundError(ConfigurationError):
    """No active default prompt template is available."""
    pass


class DatabaseUnavailableError(ClinicalValidationError):
    """The medical code database cannot be reached."""
    pass


class ProviderError(ClinicalValidationError):
    """A single LLM provider call failed."""
    def __init__(self, message: str, provider: str):
        super().__init__(message)
        self.provider = provider


class ServiceUnavailableError(ClinicalValidationError):
    """The validation service cannot produce a result right now."""
    pass


class AllProvidersFailedError(ServiceUnavailableError):
    """Every provider in the fallback chain failed."""
    def __init__(self, failures: Sequence[Tuple[str, BaseException]]):
        self.failures: List[Tuple[str, BaseException]] = list(failures)
        summary = "; ".join(f"{name}: {error}" for name, error in self.failures)
        super().__init__(f"All LLM providers failed ({summary or 'no providers configured'})")

    @property
    def providers(self) -> List[str]:
        return [name for name, _ in self.failures]


class ResponseValidationError(ClinicalValidationError):
    """Model output could not be turned into a validation result."""
    pass


class ResponseParseError(ResponseValidationError):
    """Model output did not contain a parseable JSON object."""
    pass


class MissingFieldsError(ResponseValidationError):
    """Model output is missing required fields."""
    def __init__(self, missing_fields: Sequence[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(
            f"LLM response missing required fields: {', '.join(self.missing_fields)}"
        )


class InvalidStatusError(ResponseValidationError):
    """Model output carries an unrecognized validation status."""
    def __init__(self, status):
        self.status = status
        super().__init__(f"Invalid validationStatus: {status}")
