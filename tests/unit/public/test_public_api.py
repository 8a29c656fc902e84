from __future__ import annotations

import beanwire
import beanwire.exceptions as beanwire_exceptions
from beanwire.lock_mode import LockMode


def test_all_names_are_importable() -> None:
    for name in beanwire.__all__:
        assert hasattr(beanwire, name), name


def test_exceptions_are_reexported() -> None:
    exported = {
        name
        for name in beanwire.__all__
        if isinstance(getattr(beanwire, name), type)
        and issubclass(getattr(beanwire, name), Exception)
    }
    defined = {
        name
        for name, value in vars(beanwire_exceptions).items()
        if isinstance(value, type) and issubclass(value, beanwire_exceptions.BeanWireError)
    }

    assert exported == defined


def test_lock_mode_module_reexports_enum() -> None:
    assert LockMode is beanwire.LockMode
    assert {mode.value for mode in LockMode} == {"thread", "none"}
