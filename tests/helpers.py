from __future__ import annotations

from typing import Any

from beanwire import ClassInstantiator


class Clock:
    pass


class Greeter:
    def __init__(self, greeting: str = "hello", *, punctuation: str = "!") -> None:
        self.greeting = greeting
        self.punctuation = punctuation

    def greet(self, name: str) -> str:
        return f"{self.greeting}, {name}{self.punctuation}"


class RecordingInstantiator:
    """Instantiator double that records every ``create`` call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any, tuple[Any, ...]]] = []
        self._delegate = ClassInstantiator()

    @property
    def created_names(self) -> list[str]:
        return [name for name, _, _ in self.calls]

    def create(self, name: str, definition: Any, args: tuple[Any, ...]) -> Any:
        self.calls.append((name, definition, args))
        return self._delegate.create(name, definition, args)
