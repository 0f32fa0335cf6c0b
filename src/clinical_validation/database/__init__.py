# ============================================================================
# src/clinical_validation/database/__init__.py
# ============================================================================
"""
Medical code database access and prompt context assembly.
"""

from .code_store import MedicalCodeStore, QueryFunction, TemplateProvider
from .context_formatter import NO_CONTEXT_FOUND, format_database_context
from .context_builder import generate_database_context, build_context_lookups, ContextLookup

__all__ = [
    "MedicalCodeStore",
    "QueryFunction",
    "TemplateProvider",
    "NO_CONTEXT_FOUND",
    "format_database_context",
    "generate_database_context",
    "build_context_lookups",
    "ContextLookup",
]
