from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from enum import Enum
from typing import Any, TypeVar, overload

from beanwire._internal.collaborators import (
    BeanDefinitionLike,
    ConstructionArgs,
    DefinitionSource,
    Instantiator,
    as_definition_source,
    as_instantiator,
)
from beanwire._internal.lock_mode import LockMode
from beanwire._internal.post_processors import PostProcessor, PostProcessorRegistry
from beanwire._internal.singleton_cache import BeanName, SingletonCache
from beanwire._internal.type_checks import is_runtime_class
from beanwire.exceptions import (
    BeanWireDefinitionNotFoundError,
    BeanWireInstantiationError,
    BeanWireInvalidRegistrationError,
    BeanWireInvalidRequiredTypeError,
    BeanWireTypeMismatchError,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)
_MISSING = object()


class ResolutionState(Enum):
    """Terminal state of a single ``get_bean`` resolution."""

    CACHE_HIT = "cache_hit"
    """The bean was already cached and returned as is."""

    CREATED = "created"
    """The bean was built by the instantiator and published to the cache."""

    FAILED = "failed"
    """Definition lookup or instantiation failed; nothing was cached."""


class BeanFactory:
    """Resolve beans by name and cache each one as a singleton.

    A factory composes a definition source, which describes beans, and an
    instantiator, which builds them. On a request the singleton cache is
    checked first; on a miss the definition is looked up, the instantiator is
    called, and the result is cached and returned. Later requests for the same
    name return the cached object.

    Failures are never cached: a name that failed to resolve can be requested
    again and will go through lookup and instantiation from scratch.
    """

    def __init__(
        self,
        definition_source: DefinitionSource | Callable[[BeanName], BeanDefinitionLike | None],
        instantiator: Instantiator | Callable[[BeanName, BeanDefinitionLike, ConstructionArgs], Any],
        *,
        cache: SingletonCache | None = None,
        lock_mode: LockMode = LockMode.THREAD,
    ) -> None:
        """Initialize a factory with its collaborators.

        Args:
            definition_source: Object with ``lookup(name)``, or a plain
                ``(name) -> definition | None`` callable.
            instantiator: Object with ``create(name, definition, args)``, or a
                plain callable with the same signature.
            cache: Singleton cache to use. A fresh cache owned by this factory
                is created when omitted.
            lock_mode: ``LockMode.THREAD`` guarantees at most one creation per
                bean name under concurrent callers, including callers of other
                factories sharing the same ``cache``. ``LockMode.NONE`` skips
                locking.

        Examples:
            .. code-block:: python

                registry = DefinitionRegistry()
                registry.register_definition("clock", BeanDefinition(bean_class=SystemClock))
                factory = BeanFactory(registry, ClassInstantiator())

                clock = factory.get_bean("clock", required_type=SystemClock)

        """
        self._definition_source = as_definition_source(definition_source)
        self._instantiator = as_instantiator(instantiator)
        self._cache = SingletonCache() if cache is None else cache
        self._lock_mode = lock_mode
        self._post_processors = PostProcessorRegistry()

    @property
    def lock_mode(self) -> LockMode:
        return self._lock_mode

    # region Resolution Methods
    @overload
    def get_bean(self, name: BeanName, *args: Any, required_type: type[T]) -> T: ...

    @overload
    def get_bean(self, name: BeanName, *args: Any, required_type: None = None) -> Any: ...

    def get_bean(
        self,
        name: BeanName,
        *args: Any,
        required_type: type[Any] | None = None,
    ) -> Any:
        """Return the singleton bean registered under ``name``, creating it on first use.

        Construction arguments are forwarded to the instantiator only when the
        bean is created. Once the bean is cached, any arguments passed on later
        calls are ignored and the cached instance is returned.

        Args:
            name: Bean name to resolve.
            *args: Construction arguments used if the bean has to be created.
            required_type: Optional class the bean must be an instance of.

        Returns:
            The cached or newly created bean.

        Raises:
            BeanWireInvalidRegistrationError: If ``name`` is empty.
            BeanWireInvalidRequiredTypeError: If ``required_type`` is not a
                runtime class.
            BeanWireDefinitionNotFoundError: If the bean is not cached and the
                definition source has no definition for it.
            BeanWireInstantiationError: If the instantiator raised.
            BeanWireTypeMismatchError: If the bean is not an instance of
                ``required_type``.

        Examples:
            .. code-block:: python

                repo = factory.get_bean("repo")
                client = factory.get_bean("client", "https://api.example.com")
                typed = factory.get_bean("repo", required_type=SqlRepo)

        """
        if not name:
            msg = "get_bean() parameter 'name' must be a non-empty string."
            raise BeanWireInvalidRegistrationError(msg)
        if required_type is not None:
            self._validate_required_type(required_type)

        bean = self._resolve(name, args)

        if required_type is not None and not isinstance(bean, required_type):
            raise BeanWireTypeMismatchError(name, required_type, bean)
        return bean

    def _validate_required_type(self, required_type: object) -> None:
        msg = (
            f"get_bean() parameter 'required_type' must be a runtime class, "
            f"got {required_type!r}."
        )
        if not is_runtime_class(required_type):
            raise BeanWireInvalidRequiredTypeError(msg)
        try:
            # Protocols without @runtime_checkable only fail once isinstance is called.
            isinstance(_MISSING, required_type)
        except TypeError as exc:
            raise BeanWireInvalidRequiredTypeError(msg) from exc

    def _resolve(self, name: BeanName, args: ConstructionArgs) -> Any:
        bean = self._cache.find(name, _MISSING)
        if bean is not _MISSING:
            self._log_resolution(name, ResolutionState.CACHE_HIT)
            return bean

        with self._creation_guard(name):
            # Another caller may have published the bean while we waited.
            bean = self._cache.find(name, _MISSING)
            if bean is not _MISSING:
                self._log_resolution(name, ResolutionState.CACHE_HIT)
                return bean

            definition = self._definition_source.lookup(name)
            if definition is None:
                self._log_resolution(name, ResolutionState.FAILED)
                raise BeanWireDefinitionNotFoundError(name)

            try:
                bean = self._instantiator.create(name, definition, args)
            except Exception as exc:
                self._log_resolution(name, ResolutionState.FAILED)
                raise BeanWireInstantiationError(name, exc) from exc

            bean = self._cache.add(name, bean)
            self._log_resolution(name, ResolutionState.CREATED)
            return bean

    def _creation_guard(self, name: BeanName) -> AbstractContextManager[Any]:
        if self._lock_mode is LockMode.NONE:
            return nullcontext()
        return self._cache.creation_lock(name)

    def _log_resolution(self, name: BeanName, state: ResolutionState) -> None:
        logger.debug("Bean %r resolution finished: state=%s", name, state.name)

    # endregion Resolution Methods

    # region Singleton Registry Methods
    def register_singleton(self, name: BeanName, instance: Any) -> None:
        """Publish a pre-built instance as the singleton for ``name``.

        The definition source and instantiator are never consulted for a name
        registered this way.

        Args:
            name: Bean name to register the instance under.
            instance: Bean instance to cache.

        Raises:
            BeanWireInvalidRegistrationError: If ``name`` is empty or already
                holds a singleton.

        """
        if not name:
            msg = "register_singleton() parameter 'name' must be a non-empty string."
            raise BeanWireInvalidRegistrationError(msg)

        with self._creation_guard(name):
            if name in self._cache:
                msg = f"Bean {name!r} already holds a singleton instance."
                raise BeanWireInvalidRegistrationError(msg)
            self._cache.add(name, instance)
        logger.info("Registered singleton bean %r of type %s", name, type(instance).__qualname__)

    def contains_singleton(self, name: BeanName) -> bool:
        """Return true when a singleton is cached for ``name``."""
        return name in self._cache

    def singleton_names(self) -> tuple[BeanName, ...]:
        """Get names of cached singletons in creation order."""
        return self._cache.names()

    # endregion Singleton Registry Methods

    # region Post-Processor Methods
    def register_post_processor(self, post_processor: PostProcessor) -> None:
        """Append a post-processor to the registration list.

        Post-processors are stored in registration order and are not invoked
        by the factory.

        Args:
            post_processor: Hook object to register.

        """
        self._post_processors.register(post_processor)

    def list_post_processors(self) -> list[PostProcessor]:
        """Get registered post-processors in registration order.

        The returned list is a snapshot; mutating it does not affect the
        factory.
        """
        return list(self._post_processors.values())

    # endregion Post-Processor Methods


__all__ = ["BeanFactory", "ResolutionState"]
