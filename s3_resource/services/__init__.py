# Services package
from .config_resolver import ConfigResolver, FallbackConfigSource, YamlConfigFile
from .digest import file_md5, normalize_etag, in_sync
from .reconciler import Reconciler

__all__ = [
    'ConfigResolver',
    'FallbackConfigSource',
    'YamlConfigFile',
    'file_md5',
    'normalize_etag',
    'in_sync',
    'Reconciler'
]
