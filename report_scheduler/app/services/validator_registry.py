from __future__ import annotations

import importlib
from pathlib import Path
from typing import Dict, List, Optional, Type

from report_scheduler.app.logging_config import get_logger

logger = get_logger(__name__)

VALIDATORS_PACKAGE = "report_scheduler.app.validators"


class EntityValidatorRegistry:
    """Registry of entity validator classes, keyed by entity name.

    Validator instances carry per-request state (errors, cached code sets),
    so the registry hands out classes and builds a fresh instance on request.
    """

    _validators: Dict[str, Type] = {}
    _discovery_done = False

    @classmethod
    def register(cls, validator_class: Type) -> None:
        """Register a validator class.

        The validator_class must expose an `entity_name` class attribute.
        """
        name = getattr(validator_class, "entity_name", None)
        if not name:
            raise ValueError("Validator class must define an entity_name attribute")
        cls._validators[name] = validator_class

    @classmethod
    def get_validator_class(cls, entity_name: str) -> Optional[Type]:
        """Get validator class by entity name. Triggers auto-discovery if not done yet."""
        cls.auto_discover()
        return cls._validators.get(entity_name)

    @classmethod
    def create_validator(cls, entity_name: str, **kwargs):
        """Return a new validator instance for the entity, or None if none is registered.

        kwargs are forwarded to the validator constructor.
        """
        validator_class = cls.get_validator_class(entity_name)
        if not validator_class:
            return None
        return validator_class(**kwargs)

    @classmethod
    def list_validators(cls) -> List[Dict[str, str]]:
        """
        List all registered validators.
        Returns:
            List of dicts with 'entity' and 'class' keys
        """
        cls.auto_discover()
        return [
            {'entity': name, 'class': validator_class.__name__}
            for name, validator_class in cls._validators.items()
            ]

    @classmethod
    def auto_discover(cls) -> None:
        """Import all modules of the validators package to trigger registration."""
        if cls._discovery_done:
            return
        package = importlib.import_module(VALIDATORS_PACKAGE)
        target_dir = Path(package.__file__).parent

        for py in sorted(target_dir.glob('*.py')):
            if py.name == '__init__.py' or not py.is_file():
                continue
            module_name = f"{VALIDATORS_PACKAGE}.{py.stem}"
            try:
                importlib.import_module(module_name)
            except Exception as e:
                # Log error but don't stop discovery on single-module errors
                logger.error("Error importing validator module", module_name=module_name, error=str(e))
                continue
        cls._discovery_done = True


def register_validator(validator_class: Type) -> Type:
    """
    Decorator registering an entity validator class.

    Example usage:
    @register_validator
    class MyEntityValidator(EntityValidator):
        entity_name = "my_entity"
    """
    EntityValidatorRegistry.register(validator_class)
    return validator_class
