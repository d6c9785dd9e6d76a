"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── QueryError                    (query.py)
    │   ├── UnsupportedOperatorError
    │   ├── UnsupportedAnalyzerError
    │   └── InvalidRangeValueCountError
    └── ApplicationError              (application.py)
        └── ConfigError               (mp_esquery.config.validation)
"""

from mp_esquery.kernel.errors.application import ApplicationError
from mp_esquery.kernel.errors.base import BaseError
from mp_esquery.kernel.errors.query import (
    InvalidRangeValueCount,
    InvalidRangeValueCountError,
    QueryError,
    UnsupportedAnalyzerError,
    UnsupportedOperatorError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InvalidRangeValueCount",
    "InvalidRangeValueCountError",
    "QueryError",
    "UnsupportedAnalyzerError",
    "UnsupportedOperatorError",
]
