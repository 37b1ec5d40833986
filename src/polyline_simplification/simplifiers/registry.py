from typing import Any, Dict, Optional, Type

from polyline_simplification.utils.registry import Registry
from .strategy import SimplifierStrategy

# Create a registry for simplifier strategies
strategy_registry = Registry[SimplifierStrategy]("SimplifierStrategy")

register_simplifier = strategy_registry.register


def get_simplifier(name: str, config: Optional[Dict[str, Any]] = None) -> SimplifierStrategy:
    """
    Get a configured simplifier by name.

    Args:
        name: Registered name of the simplification algorithm.
        config: Algorithm parameters (tolerances, counts, flags).

    Returns:
        SimplifierStrategy: Configured strategy instance.

    Raises:
        ValueError: If the algorithm is not found or its parameters are invalid.
    """
    strategy_cls = strategy_registry.get(name)
    return strategy_cls({**(config or {}), "name": name})


def list_simplifiers() -> Dict[str, Type[SimplifierStrategy]]:
    """
    Get a dictionary of all registered simplifier strategies.

    Returns:
        Dict[str, Type[SimplifierStrategy]]: Dictionary mapping names to classes.
    """
    return strategy_registry.list()
