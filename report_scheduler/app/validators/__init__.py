"""
Entity validators.

Every module in this package is imported by
EntityValidatorRegistry.auto_discover(), so entity validators register
themselves with @register_validator.
"""
