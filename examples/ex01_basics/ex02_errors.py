"""Errors: missing definitions, failing construction, and type checks.

Failures are never cached, so a name that failed once can be resolved later.
"""

from __future__ import annotations

from beanwire import (
    BeanDefinition,
    BeanFactory,
    BeanWireDefinitionNotFoundError,
    BeanWireInstantiationError,
    BeanWireTypeMismatchError,
    ClassInstantiator,
    DefinitionRegistry,
)


class Cache:
    pass


def main() -> None:
    registry = DefinitionRegistry()
    factory = BeanFactory(registry, ClassInstantiator())

    try:
        factory.get_bean("cache")
    except BeanWireDefinitionNotFoundError as error:
        print(f"not_found={error.bean_name}")  # => not_found=cache

    registry.register_definition("cache", BeanDefinition(bean_class=Cache))
    try:
        factory.get_bean("cache", "unexpected")
    except BeanWireInstantiationError as error:
        print(f"cause={type(error.cause).__name__}")  # => cause=TypeError

    cache = factory.get_bean("cache")
    print(f"resolved={type(cache).__name__}")  # => resolved=Cache

    try:
        factory.get_bean("cache", required_type=str)
    except BeanWireTypeMismatchError as error:
        print(f"mismatch={error.actual_type.__name__}!={error.required_type.__name__}")  # => mismatch=Cache!=str


if __name__ == "__main__":
    main()
