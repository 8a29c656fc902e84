from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

from beanwire._internal.singleton_cache import BeanName

BeanDefinitionLike: TypeAlias = Any
"""A definition value owned by the definition source. Opaque to the factory."""

ConstructionArgs: TypeAlias = tuple[Any, ...]
"""Positional arguments forwarded to the instantiator on the creation path."""


@runtime_checkable
class DefinitionSource(Protocol):
    """Protocol for objects that supply bean definitions by name."""

    def lookup(self, name: BeanName) -> BeanDefinitionLike | None:
        """Return the definition for the given name, or ``None`` when absent.

        Args:
            name: Bean name to look up.

        """


@runtime_checkable
class Instantiator(Protocol):
    """Protocol for objects that build bean instances from definitions."""

    def create(
        self,
        name: BeanName,
        definition: BeanDefinitionLike,
        args: ConstructionArgs,
    ) -> Any:
        """Build and return a new bean instance.

        Args:
            name: Bean name being created.
            definition: Definition returned by the definition source.
            args: Construction arguments passed to ``get_bean``; may be empty.

        """


@dataclass(frozen=True, slots=True)
class _CallableDefinitionSource:
    lookup_func: Callable[[BeanName], BeanDefinitionLike | None]

    def lookup(self, name: BeanName) -> BeanDefinitionLike | None:
        return self.lookup_func(name)


@dataclass(frozen=True, slots=True)
class _CallableInstantiator:
    create_func: Callable[[BeanName, BeanDefinitionLike, ConstructionArgs], Any]

    def create(
        self,
        name: BeanName,
        definition: BeanDefinitionLike,
        args: ConstructionArgs,
    ) -> Any:
        return self.create_func(name, definition, args)


def as_definition_source(
    source: DefinitionSource | Callable[[BeanName], BeanDefinitionLike | None],
) -> DefinitionSource:
    """Return ``source`` as a ``DefinitionSource``, wrapping plain callables.

    Args:
        source: Object with a ``lookup`` method, or a ``(name) -> definition``
            callable.

    Raises:
        TypeError: If ``source`` is neither.

    """
    if isinstance(source, DefinitionSource):
        return source
    if callable(source):
        return _CallableDefinitionSource(source)
    msg = f"Definition source must define lookup() or be callable, got {type(source).__name__}."
    raise TypeError(msg)


def as_instantiator(
    instantiator: Instantiator | Callable[[BeanName, BeanDefinitionLike, ConstructionArgs], Any],
) -> Instantiator:
    """Return ``instantiator`` as an ``Instantiator``, wrapping plain callables.

    Args:
        instantiator: Object with a ``create`` method, or a
            ``(name, definition, args) -> instance`` callable.

    Raises:
        TypeError: If ``instantiator`` is neither.

    """
    if isinstance(instantiator, Instantiator):
        return instantiator
    if callable(instantiator):
        return _CallableInstantiator(instantiator)
    msg = f"Instantiator must define create() or be callable, got {type(instantiator).__name__}."
    raise TypeError(msg)
