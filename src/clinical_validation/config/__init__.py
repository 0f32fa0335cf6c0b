# ============================================================================
# src/clinical_validation/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .base_config import base_settings, BaseSettingsConfig
from .llm_config import llm_settings, LLMSettings
from .logging_config import logging_settings, LoggingSettings
