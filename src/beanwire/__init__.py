from beanwire._internal.collaborators import DefinitionSource, Instantiator
from beanwire._internal.definitions import BeanDefinition, DefinitionRegistry
from beanwire._internal.factory import BeanFactory, ResolutionState
from beanwire._internal.instantiation import ClassInstantiator
from beanwire._internal.post_processors import PostProcessorRegistry
from beanwire._internal.singleton_cache import SingletonCache
from beanwire.exceptions import (
    BeanWireDefinitionNotFoundError,
    BeanWireError,
    BeanWireInstantiationError,
    BeanWireInvalidRegistrationError,
    BeanWireInvalidRequiredTypeError,
    BeanWireTypeMismatchError,
)
from beanwire.lock_mode import LockMode

__all__ = [
    "BeanDefinition",
    "BeanFactory",
    "BeanWireDefinitionNotFoundError",
    "BeanWireError",
    "BeanWireInstantiationError",
    "BeanWireInvalidRegistrationError",
    "BeanWireInvalidRequiredTypeError",
    "BeanWireTypeMismatchError",
    "ClassInstantiator",
    "DefinitionRegistry",
    "DefinitionSource",
    "Instantiator",
    "LockMode",
    "PostProcessorRegistry",
    "ResolutionState",
    "SingletonCache",
]
