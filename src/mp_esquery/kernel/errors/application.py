"""Application-layer errors – problems with how the library is set up."""

from __future__ import annotations

from mp_esquery.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting concern outside a single compile call."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
