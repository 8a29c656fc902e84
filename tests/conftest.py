"""Shared pytest fixtures for beanwire tests."""

from __future__ import annotations

import pytest

from beanwire import BeanDefinition, BeanFactory, DefinitionRegistry, LockMode
from tests.helpers import Clock, Greeter, RecordingInstantiator


@pytest.fixture()
def registry() -> DefinitionRegistry:
    """Registry with ``clock`` and ``greeter`` definitions."""
    registry = DefinitionRegistry()
    registry.register_definition("clock", BeanDefinition(bean_class=Clock))
    registry.register_definition("greeter", BeanDefinition(bean_class=Greeter))
    return registry


@pytest.fixture()
def instantiator() -> RecordingInstantiator:
    return RecordingInstantiator()


@pytest.fixture()
def factory(registry: DefinitionRegistry, instantiator: RecordingInstantiator) -> BeanFactory:
    """Factory with default thread locking."""
    return BeanFactory(registry, instantiator)


@pytest.fixture()
def factory_no_lock(
    registry: DefinitionRegistry,
    instantiator: RecordingInstantiator,
) -> BeanFactory:
    """Factory with locking disabled."""
    return BeanFactory(registry, instantiator, lock_mode=LockMode.NONE)
