from __future__ import annotations

import functools
import importlib
import warnings
from typing import Any

from beanwire._internal.collaborators import ConstructionArgs
from beanwire._internal.definitions import BeanDefinition
from beanwire._internal.singleton_cache import BeanName
from beanwire._internal.type_checks import is_runtime_class

# Modules that may provide a ``BaseSettings`` class, newest first.
_SETTINGS_MODULES: tuple[str, ...] = ("pydantic_settings", "pydantic.v1")


@functools.cache
def settings_base_classes() -> tuple[type[Any], ...]:
    """Return the installed Pydantic ``BaseSettings`` classes.

    Pydantic is optional; modules that are not installed are skipped, so the
    result is empty when neither ``pydantic-settings`` nor ``pydantic.v1`` is
    available.
    """
    bases: list[type[Any]] = []
    for module_name in _SETTINGS_MODULES:
        with warnings.catch_warnings():
            # pydantic.v1 warns on import under Python 3.14+.
            warnings.simplefilter("ignore", UserWarning)
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                continue
        base = getattr(module, "BaseSettings", None)
        if isinstance(base, type) and base not in bases:
            bases.append(base)
    return tuple(bases)


def is_settings_class(bean_class: object) -> bool:
    """Return true when ``bean_class`` is a Pydantic settings class."""
    if not is_runtime_class(bean_class):
        return False
    return any(issubclass(bean_class, base) for base in settings_base_classes())


class ClassInstantiator:
    """Build beans by calling ``BeanDefinition.bean_class``.

    Positional construction arguments come first, followed by the definition's
    ``kwargs``. Pydantic settings classes read their values from the
    environment and only accept keyword overrides, so positional arguments are
    rejected for them.
    """

    def create(
        self,
        name: BeanName,
        definition: BeanDefinition,
        args: ConstructionArgs,
    ) -> Any:
        """Call the definition's ``bean_class`` and return the new instance.

        Args:
            name: Bean name being created.
            definition: Definition describing the bean class and keyword arguments.
            args: Positional construction arguments.

        Raises:
            TypeError: If ``definition`` is not a ``BeanDefinition`` or positional
                arguments are passed for a settings class.

        """
        if not isinstance(definition, BeanDefinition):
            msg = (
                f"ClassInstantiator cannot build bean {name!r} from "
                f"{type(definition).__name__}; expected BeanDefinition."
            )
            raise TypeError(msg)

        bean_class = definition.bean_class
        if args and is_settings_class(bean_class):
            msg = (
                f"Settings bean {name!r} ({bean_class.__qualname__}) accepts keyword "
                f"overrides only, got {len(args)} positional argument(s)."
            )
            raise TypeError(msg)
        return bean_class(*args, **definition.kwargs)
