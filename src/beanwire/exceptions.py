from __future__ import annotations

from typing import Any


class BeanWireError(Exception):
    """Represent a base class for all BeanWire-specific failures.

    Catch this type when you want to handle any BeanWire error path without
    matching each concrete exception class individually.
    """


class BeanWireInvalidRegistrationError(BeanWireError):
    """Signal invalid registration input.

    Raised by ``BeanFactory.register_singleton`` when the name is empty or
    already holds a singleton, by ``DefinitionRegistry.register_definition``
    for empty names, and by ``BeanFactory.get_bean`` for empty names.
    """


class BeanWireDefinitionNotFoundError(BeanWireError):
    """Signal that no bean definition exists for the requested name.

    Raised by ``BeanFactory.get_bean`` when the singleton cache has no entry
    and the definition source returns ``None``. Nothing is cached, so the same
    name can be requested again once a definition becomes available.
    """

    def __init__(self, bean_name: str) -> None:
        self.bean_name = bean_name
        super().__init__(f"No bean definition found for name {bean_name!r}")


class BeanWireInstantiationError(BeanWireError):
    """Signal that the instantiator failed to build a bean.

    The original exception is available as ``cause`` and as ``__cause__``.
    The name stays unresolved and is eligible for another attempt on the next
    ``get_bean`` call.
    """

    def __init__(self, bean_name: str, cause: BaseException) -> None:
        self.bean_name = bean_name
        self.cause = cause
        super().__init__(
            f"Failed to instantiate bean {bean_name!r}: {type(cause).__name__}: {cause}",
        )


class BeanWireTypeMismatchError(BeanWireError):
    """Signal that a resolved bean does not satisfy the requested type.

    Raised by ``BeanFactory.get_bean`` when ``required_type`` is passed and the
    resolved instance is not an instance of it.
    """

    def __init__(self, bean_name: str, required_type: type[Any], instance: object) -> None:
        self.bean_name = bean_name
        self.required_type = required_type
        self.actual_type = type(instance)
        super().__init__(
            f"Bean {bean_name!r} is of type {self.actual_type.__qualname__}, "
            f"expected {required_type.__qualname__}",
        )


class BeanWireInvalidRequiredTypeError(BeanWireError):
    """Signal a ``required_type`` that cannot be checked at runtime.

    Typical triggers are subscripted generics such as ``list[int]`` or
    non-class objects. Typical fix is passing the runtime class (``list``) or a
    ``runtime_checkable`` protocol.
    """
