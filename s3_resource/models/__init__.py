"""
Models package for the S3 file resource.
"""
from .data_models import (
    DesiredState,
    ReconcileAction,
    ResourceSpec,
    ObjectLocation,
    ObjectMetadata
)
from .config import ClientConfig, build_candidate, validate_config

__all__ = [
    'DesiredState',
    'ReconcileAction',
    'ResourceSpec',
    'ObjectLocation',
    'ObjectMetadata',
    'ClientConfig',
    'build_candidate',
    'validate_config'
]
