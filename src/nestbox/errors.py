"""Nestbox exception hierarchy.

Shared by the container and the module-shape validator so callers can
catch every container-raised failure through ``NestboxError``.
Exceptions raised by a module's own ``load`` or route functions are never
wrapped in these types.
"""


class NestboxError(Exception):
    """Base for all nestbox-specific errors."""


class ConfigurationError(NestboxError):
    """Raised when the container is created without a context."""


class LifecycleError(NestboxError):
    """Raised when an operation is attempted in the wrong lifecycle phase.

    Loading a module after ``init()``, or calling ``init()`` twice.
    """


class ArgumentError(NestboxError):
    """Raised when a required argument is missing."""


class StateError(NestboxError):
    """Raised when the same module object is loaded twice."""


class ContractError(NestboxError):
    """Raised when a module does not have the required shape.

    ``load`` must be callable; ``routes``, when present, must be callable;
    ``actions``, when present, must be a mapping.
    """
