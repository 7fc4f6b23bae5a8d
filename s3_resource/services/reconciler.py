"""
Ensure-state reconciliation of one local file against one S3 object.
"""
import os
from typing import Callable, Optional

from loguru import logger

from ..clients.s3_manager import S3Manager
from ..models.config import ClientConfig
from ..models.data_models import DesiredState, ObjectLocation, ReconcileAction, ResourceSpec
from .config_resolver import ConfigResolver
from .digest import in_sync, normalize_etag


class Reconciler:
    """
    Converges the file at spec.path toward spec.ensure.

    exists/create/destroy/update are the lifecycle operations a hosting agent
    invokes; apply() performs the same dispatch for standalone callers. Every
    failure propagates and aborts the pass, nothing is retried here.
    """
    
    def __init__(
        self,
        spec: ResourceSpec,
        resolver: Optional[ConfigResolver] = None,
        store_factory: Callable[[ClientConfig], S3Manager] = S3Manager
    ):
        """
        Initialize reconciler for a single resource.
        
        Args:
            spec: Declared resource parameters
            resolver: Config resolver, defaults to one without a fallback source
            store_factory: Builds the store client from a resolved configuration
        """
        self.spec = spec
        self.resolver = resolver or ConfigResolver()
        self.store_factory = store_factory
    
    def _connect(self):
        """Resolve configuration and location, then build the store client."""
        config = self.resolver.resolve(self.spec)
        location = ObjectLocation.parse(self.spec.source)
        return self.store_factory(config), location
    
    def exists(self) -> bool:
        """Check whether the local path exists; no content comparison."""
        return os.path.exists(self.spec.path)
    
    def create(self) -> ReconcileAction:
        """Download the object to the local path unconditionally."""
        store, location = self._connect()
        logger.info(f"Fetching {location} to {self.spec.path}")
        store.get(location.bucket, location.key, self.spec.path)
        return ReconcileAction.CREATED
    
    def destroy(self) -> ReconcileAction:
        """Remove the local file, doing nothing if it is already gone."""
        try:
            os.remove(self.spec.path)
        except FileNotFoundError:
            logger.debug(f"{self.spec.path} already absent")
            return ReconcileAction.NOOP
        
        logger.info(f"Removed {self.spec.path}")
        return ReconcileAction.REMOVED
    
    def update(self) -> ReconcileAction:
        """
        Bring the local file up to date with the remote object.
        
        A missing file is created. An existing file is only downloaded again
        when its MD5 differs from the object's ETag.
        """
        if not self.exists():
            return self.create()
        
        store, location = self._connect()
        logger.debug(f"Comparing MD5 values for file: {location.key}")
        metadata = store.head(location.bucket, location.key)
        
        if in_sync(self.spec.path, metadata.etag):
            logger.debug(f"File {location.key} already up-to-date")
            return ReconcileAction.UNCHANGED

        logger.debug(f"Update file {self.spec.path} to ETag {normalize_etag(metadata.etag)}")
        logger.info(f"Fetching {location} to {self.spec.path}")
        store.get(location.bucket, location.key, self.spec.path)
        return ReconcileAction.UPDATED
    
    def apply(self) -> ReconcileAction:
        """
        Run one reconciliation pass for the declared desired state.
        
        Returns:
            ReconcileAction describing what was done
        """
        state = self.spec.ensure
        logger.debug(f"Reconciling {self.spec.path} toward '{state.value}'")
        
        if state is DesiredState.PRESENT:
            if self.exists():
                logger.debug(f"{self.spec.path} already present")
                return ReconcileAction.UNCHANGED
            return self.create()
        
        if state is DesiredState.ABSENT:
            if not self.exists():
                return ReconcileAction.NOOP
            return self.destroy()
        
        return self.update()
