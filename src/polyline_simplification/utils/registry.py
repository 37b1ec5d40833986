# polyline_simplification/utils/registry.py
"""
Generic registry pattern implementation.

This module provides a generic registry that maps names to classes, so that
simplification algorithms can be selected by name from configuration.
"""

from typing import Callable, Dict, Generic, Type, TypeVar

T = TypeVar('T')


class Registry(Generic[T]):
    """
    Generic name-to-class registry for a specific base type.
    """

    def __init__(self, type_name: str):
        """
        Initialize the registry.

        Args:
            type_name: Name of the registered type, used in error messages.
        """
        self._registry: Dict[str, Type[T]] = {}
        self._type_name = type_name

    def register(self, name: str) -> Callable[[Type[T]], Type[T]]:
        """
        Decorator that registers a class under a name.

        Args:
            name: Name to register the class under.

        Returns:
            Callable: Decorator returning the class unchanged.

        Raises:
            ValueError: If a class with the same name is already registered.
        """

        def decorator(cls: Type[T]) -> Type[T]:
            if name in self._registry:
                raise ValueError(f"{self._type_name} '{name}' is already registered")
            self._registry[name] = cls
            return cls

        return decorator

    def get(self, name: str) -> Type[T]:
        """
        Get a class by name.

        Args:
            name: Registered name.

        Returns:
            Type[T]: The registered class.

        Raises:
            ValueError: If no class is registered with the given name.
        """
        if name not in self._registry:
            raise ValueError(
                f"{self._type_name} '{name}' not found in registry. "
                f"Available: {sorted(self._registry.keys())}"
            )
        return self._registry[name]

    def list(self) -> Dict[str, Type[T]]:
        """Return a copy of the name-to-class mapping."""
        return self._registry.copy()
