from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from beanwire._internal.singleton_cache import BeanName
from beanwire.exceptions import BeanWireInvalidRegistrationError


@dataclass(frozen=True, kw_only=True, slots=True)
class BeanDefinition:
    """Describe how a bean is built.

    The factory never inspects a definition; it hands it to the instantiator
    untouched. ``ClassInstantiator`` calls ``bean_class`` with the positional
    arguments passed to ``get_bean`` followed by ``kwargs``.
    """

    bean_class: Callable[..., Any]
    """A class or any other callable that produces the bean."""
    kwargs: Mapping[str, Any] = field(default_factory=dict)
    """Literal keyword arguments passed on every construction."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "kwargs", MappingProxyType(dict(self.kwargs)))


class DefinitionRegistry:
    """Hold bean definitions in memory and serve them as a definition source.

    Registration keys are unique: registering a definition for an existing name
    replaces the previous one. Beans already cached by a factory are not
    affected by a replacement.
    """

    def __init__(self) -> None:
        self._definitions_by_name: dict[BeanName, BeanDefinition] = {}

    def register_definition(self, name: BeanName, definition: BeanDefinition) -> None:
        """Register a definition under a bean name.

        Args:
            name: Bean name the definition is served for.
            definition: Definition to return from ``lookup``.

        Raises:
            BeanWireInvalidRegistrationError: If ``name`` is empty.

        Examples:
            .. code-block:: python

                registry = DefinitionRegistry()
                registry.register_definition("clock", BeanDefinition(bean_class=SystemClock))

        """
        if not name:
            msg = "register_definition() parameter 'name' must be a non-empty string."
            raise BeanWireInvalidRegistrationError(msg)
        self._definitions_by_name[name] = definition

    def lookup(self, name: BeanName) -> BeanDefinition | None:
        """Get the definition registered for a name, if it exists.

        Args:
            name: Bean name to look up.

        """
        return self._definitions_by_name.get(name)

    def contains_definition(self, name: BeanName) -> bool:
        return name in self._definitions_by_name

    def definition_names(self) -> tuple[BeanName, ...]:
        """Get registered bean names in registration order."""
        return tuple(self._definitions_by_name)

    def __len__(self) -> int:
        return len(self._definitions_by_name)
