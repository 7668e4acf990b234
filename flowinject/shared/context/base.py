from typing import Any, Dict, Optional, Type, TypeVar, Union, overload

T = TypeVar("T")

_MISSING = object()


class AbstractContext:
    """
    Registry holding at most one object per class, plus objects stored
    under string keys.
    """

    def __init__(self):
        self._by_type: Dict[Type, Any] = {}
        self._by_key: Dict[str, Any] = {}

    def register(self, key_or_value: Any, value: Any = _MISSING) -> None:
        """
        Register an object.

        ``register(value)`` stores it under ``type(value)``;
        ``register(SomeClass, value)`` stores it under ``SomeClass``;
        ``register("name", value)`` stores it under a string key.
        Registering again under the same key replaces the previous object.
        """
        if value is _MISSING:
            self._by_type[type(key_or_value)] = key_or_value
        elif isinstance(key_or_value, str):
            self._by_key[key_or_value] = value
        elif isinstance(key_or_value, type):
            self._by_type[key_or_value] = value
        else:
            raise TypeError(
                f"Context keys must be str or type, got {type(key_or_value).__name__}"
            )

    @overload
    def get_registered_object(self, key: Type[T]) -> Optional[T]: ...

    @overload
    def get_registered_object(self, key: str) -> Optional[Any]: ...

    def get_registered_object(self, key: Union[Type, str]):
        """Return the object registered under ``key`` or None."""
        if isinstance(key, str):
            return self._by_key.get(key)
        return self._by_type.get(key)

    def contains(self, key: Union[Type, str]) -> bool:
        if isinstance(key, str):
            return key in self._by_key
        return key in self._by_type

    def __contains__(self, key: Union[Type, str]) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return len(self._by_type) + len(self._by_key)

    def clear(self) -> None:
        self._by_type.clear()
        self._by_key.clear()

    def __repr__(self) -> str:
        types = ", ".join(cls.__name__ for cls in self._by_type)
        return f"{type(self).__name__}([{types}])"
