"""
Services for the report scheduler.

- code_sources: enum sources (endpoint -> {code: label})
- code_set_cache: per-validator memoized code-set lookups
- frequency_option_rules / period_rules: declarative rule tables
- validator_registry: entity name -> validator class
"""
