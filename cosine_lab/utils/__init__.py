"""Utility modules for Cosine Lab.

Common utilities used across the project.
"""

from cosine_lab.utils.config import Config, load_config, validate_config
from cosine_lab.utils.llm_client import LLMClient
from cosine_lab.utils.logger import get_logger, setup_logging

__all__ = [
    "Config",
    "LLMClient",
    "get_logger",
    "load_config",
    "setup_logging",
    "validate_config",
]
