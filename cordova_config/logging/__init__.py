"""
Unified logging package: format with importance (0-10) for CLI log output.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from cordova_config.logging.unified_logging import (
    LEVEL_TO_IMPORTANCE,
    PACKAGE_LOGGER,
    UNIFIED_DATE_FMT,
    UNIFIED_FORMAT_STR,
    UnifiedFormatter,
    create_unified_formatter,
    importance_from_level,
    install_unified_record_factory,
    setup_logging,
)

__all__ = [
    "LEVEL_TO_IMPORTANCE",
    "PACKAGE_LOGGER",
    "UNIFIED_DATE_FMT",
    "UNIFIED_FORMAT_STR",
    "UnifiedFormatter",
    "create_unified_formatter",
    "importance_from_level",
    "install_unified_record_factory",
    "setup_logging",
]
