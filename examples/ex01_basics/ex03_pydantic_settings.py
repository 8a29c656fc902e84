"""Pydantic settings: configuration objects as singleton beans.

Settings classes load their values from the environment on first resolution.
Definition ``kwargs`` act as overrides. Run with ``EXAMPLE_APP_NAME=orders`` to
see the environment value picked up.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from beanwire import BeanDefinition, BeanFactory, ClassInstantiator, DefinitionRegistry


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EXAMPLE_APP_")

    name: str = "demo"
    debug: bool = False


def main() -> None:
    registry = DefinitionRegistry()
    registry.register_definition("settings", BeanDefinition(bean_class=AppSettings, kwargs={"debug": True}))
    factory = BeanFactory(registry, ClassInstantiator())

    settings = factory.get_bean("settings", required_type=AppSettings)
    print(f"name={settings.name} debug={settings.debug}")  # => name=demo debug=True


if __name__ == "__main__":
    main()
