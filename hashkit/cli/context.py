"""
Click context extension for hashkit CLI.

Provides HashkitContext dataclass that holds the services passed
through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.bootstrap import bootstrap
from ..core.container import resolve
from ..core.interfaces.hashing import IHashing
from ..core.interfaces.token import ITokenGenerator
from ..core.settings import HashkitSettings, load_settings


@dataclass
class HashkitContext:
    """Extended context passed through Click command chain.

    Attributes:
        settings: Loaded configuration
        hasher: Hashing service
        tokens: Token generator
    """

    settings: HashkitSettings
    hasher: IHashing
    tokens: ITokenGenerator

    @classmethod
    def create(cls, config_path: Path | None = None) -> HashkitContext:
        """Load settings, bootstrap the container and resolve the services.

        Args:
            config_path: Explicit config file (otherwise discovered from cwd)

        Returns:
            Configured HashkitContext instance
        """
        settings = load_settings(config_path=config_path)
        bootstrap(settings=settings)
        return cls(
            settings=settings,
            hasher=resolve(IHashing),  # type: ignore[type-abstract]
            tokens=resolve(ITokenGenerator),  # type: ignore[type-abstract]
        )
