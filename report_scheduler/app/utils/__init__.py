"""
Utility functions for the report scheduler.

This package contains:
- cache_utils: Named TTL caches (cachetools) shared across validator instances
- validation_utils: Code normalization and set/pattern membership predicates
"""
