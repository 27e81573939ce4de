"""pemfinder: locate the private key a GitHub App signs with."""

from .config import PemfinderConfig, load_config
from .environment import BaseEnvironment, InMemoryEnvironment, LocalEnvironment
from .errors import KeyResolutionError
from .models import KeyMaterial, KeySource, ResolvedKey
from .resolver import KeyResolver, find_private_key

__version__ = "0.1.0"
__all__ = [
    "BaseEnvironment",
    "InMemoryEnvironment",
    "KeyMaterial",
    "KeyResolutionError",
    "KeyResolver",
    "KeySource",
    "LocalEnvironment",
    "PemfinderConfig",
    "ResolvedKey",
    "find_private_key",
    "load_config",
]
