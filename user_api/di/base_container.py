# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar, Union

T = TypeVar("T")


class BaseContainer:
    """Base dependency injection container: singletons and factories keyed by type or name"""
    
    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}
        self.factories: Dict[Union[Type, str], Callable[[], Any]] = {}
    
    def register_singleton(self, key: Union[Type[T], str], instance: T) -> None:
        """Register a shared instance"""
        self.instances[key] = instance
    
    def register_factory(self, key: Union[Type[T], str], factory: Callable[[], T]) -> None:
        """Register a factory called on every lookup"""
        self.factories[key] = factory
    
    def get(self, key: Union[Type[T], str]) -> T:
        """Resolve a registration; singletons win over factories"""
        if key in self.instances:
            return self.instances[key]
        if key in self.factories:
            return self.factories[key]()
        name = key.__name__ if isinstance(key, type) else key
        raise LookupError(f"No registration found for {name}")
