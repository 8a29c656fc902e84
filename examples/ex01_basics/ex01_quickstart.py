"""Quickstart: register definitions by name and resolve singletons.

Definitions describe how to build each bean. The factory builds a bean the
first time its name is requested and returns the cached instance afterwards.
"""

from __future__ import annotations

from beanwire import BeanDefinition, BeanFactory, ClassInstantiator, DefinitionRegistry


class Database:
    def __init__(self, host: str = "localhost", *, port: int = 5432) -> None:
        self.host = host
        self.port = port


def main() -> None:
    registry = DefinitionRegistry()
    registry.register_definition("database", BeanDefinition(bean_class=Database, kwargs={"port": 6543}))
    factory = BeanFactory(registry, ClassInstantiator())

    database = factory.get_bean("database", "db.internal", required_type=Database)
    print(f"database={database.host}:{database.port}")  # => database=db.internal:6543

    again = factory.get_bean("database", "ignored.host")
    print(f"same_instance={again is database}")  # => same_instance=True
    print(f"host_after_hit={again.host}")  # => host_after_hit=db.internal


if __name__ == "__main__":
    main()
