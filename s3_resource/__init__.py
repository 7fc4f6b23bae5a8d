"""
S3 File Resource - keeps a local file converged with an object in an S3-compatible bucket.
"""

from .services.reconciler import Reconciler
from .services.config_resolver import ConfigResolver, YamlConfigFile
from .models.config import ClientConfig
from .models.data_models import ResourceSpec, DesiredState, ObjectLocation, ReconcileAction
from .exceptions import S3ResourceError, ConfigError, LocatorError, StoreError

__version__ = "1.0.0"
__all__ = [
    "Reconciler",
    "ConfigResolver",
    "YamlConfigFile",
    "ClientConfig",
    "ResourceSpec",
    "DesiredState",
    "ObjectLocation",
    "ReconcileAction",
    "S3ResourceError",
    "ConfigError",
    "LocatorError",
    "StoreError"
]
