"""
Application bootstrap for hashkit.

Initializes the DI container with the logger, hashing and token services
configured from HashkitSettings.
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.hashing import IHashing
from .interfaces.logger import ILogger
from .interfaces.token import ITokenGenerator
from .settings import HashkitSettings, load_settings

_initialized = False


def bootstrap(
    settings: HashkitSettings | None = None,
    config_path: Path | None = None,
) -> ServiceContainer:
    """
    Bootstrap hashkit.

    A call without arguments is a no-op once bootstrapped. Explicit settings
    or config_path always re-register the services, replacing the ones an
    earlier call built.

    Args:
        settings: Pre-loaded settings; loaded from config/env when omitted
        config_path: Explicit config file, used only when settings is omitted

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized and settings is None and config_path is None:
        return container

    if settings is None:
        settings = load_settings(config_path=config_path)

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: HashkitSettings) -> None:
    """Register core application services."""
    from ..services.hashing import Hasher
    from ..services.logging import HashkitLogger
    from ..services.token import TokenGenerator

    logger = HashkitLogger(
        level=settings.logging.level,
        console_enabled=settings.logging.console,
        log_file=settings.logging.file,
    )
    container.register_singleton(ILogger, implementation=logger)  # type: ignore[type-abstract]

    def create_hasher() -> IHashing:
        return Hasher(logger=logger, salt_length=settings.salt.length)

    def create_token_generator() -> ITokenGenerator:
        return TokenGenerator(logger=logger, default_length=settings.token.length)

    container.register_singleton(IHashing, factory=create_hasher)  # type: ignore[type-abstract]
    container.register_singleton(ITokenGenerator, factory=create_token_generator)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
