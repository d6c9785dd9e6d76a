"""
mp_esquery – Elasticsearch query body compiler.

Import path convention::

    from mp_esquery.query import build_query, Operator, SearchAnalyzerMode
    from mp_esquery.kernel.errors import UnsupportedOperatorError
    from mp_esquery.observability.logging import JsonLoggerFactory
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
