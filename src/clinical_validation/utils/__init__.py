# ============================================================================
# src/clinical_validation/utils/__init__.py
# ============================================================================
"""
Utility modules for the clinical validation core.
"""

from .exceptions import (
    ClinicalValidationError,
    ConfigurationError,
    PromptTemplateNotFoundError,
    DatabaseUnavailableError,
    ProviderError,
    ServiceUnavailableError,
    AllProvidersFailedError,
    ResponseValidationError,
    ResponseParseError,
    MissingFieldsError,
    InvalidStatusError,
)

from .logging import (
    setup_logging,
    get_logger,
    JsonFormatter,
    log_performance,
)

__all__ = [
    # Exceptions
    'ClinicalValidationError',
    'ConfigurationError',
    'PromptTemplateNotFoundError',
    'DatabaseUnavailableError',
    'ProviderError',
    'ServiceUnavailableError',
    'AllProvidersFailedError',
    'ResponseValidationError',
    'ResponseParseError',
    'MissingFieldsError',
    'InvalidStatusError',
    # Logging
    'setup_logging',
    'get_logger',
    'JsonFormatter',
    'log_performance',
]
