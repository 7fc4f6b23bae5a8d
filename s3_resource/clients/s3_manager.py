"""
S3 client manager exposing the HEAD and GET operations used for reconciliation.
"""
import os
import shutil
import tempfile

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from ..exceptions import StoreError
from ..models.config import ClientConfig
from ..models.data_models import ObjectMetadata


DEFAULT_FILE_MODE = 0o644


class S3Manager:
    """Thin facade over a boto3 S3 client that normalizes every failure to StoreError."""
    
    def __init__(self, config: ClientConfig):
        """Initialize S3Manager with a validated client configuration."""
        self.config = config
        self.client = self._create_s3_client(config)
    
    def _create_s3_client(self, config: ClientConfig):
        """Create an S3 client from configuration."""
        kwargs = {
            'aws_access_key_id': config.access_key_id,
            'aws_secret_access_key': config.secret_access_key,
            'region_name': config.region,
        }
        
        if config.is_compatible_mode:
            addressing_style = 'path' if config.force_path_style else 'auto'
            kwargs['endpoint_url'] = config.endpoint
            kwargs['verify'] = config.ssl_verify_peer
            kwargs['config'] = Config(s3={'addressing_style': addressing_style})
            logger.debug(f"Created S3 client for endpoint: {config.endpoint} "
                         f"(addressing style: {addressing_style}, verify: {config.ssl_verify_peer})")
        else:
            logger.debug(f"Created S3 client for region: {config.region}")
        
        return boto3.client('s3', **kwargs)
    
    @staticmethod
    def _to_store_error(error: Exception) -> StoreError:
        """Map a botocore exception to a StoreError carrying code and message."""
        if isinstance(error, ClientError):
            details = error.response.get('Error', {})
            code = details.get('Code') or 'Unknown'
            message = details.get('Message') or str(error)
            return StoreError(code, message)
        return StoreError(type(error).__name__, str(error))
    
    def head(self, bucket: str, key: str) -> ObjectMetadata:
        """
        Get metadata for an object without downloading the content.
        
        Args:
            bucket: Bucket name
            key: Object key in the bucket
            
        Returns:
            ObjectMetadata with the raw ETag as reported by the store
            
        Raises:
            StoreError: If the lookup fails for any reason
        """
        try:
            response = self.client.head_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise self._to_store_error(e) from e
        
        logger.debug(f"Retrieved metadata for key: {key} from bucket: {bucket}")
        return ObjectMetadata(
            etag=response['ETag'],
            size=response.get('ContentLength'),
            last_modified=response.get('LastModified')
        )
    
    def get(self, bucket: str, key: str, destination: str) -> None:
        """
        Download an object to a local path.
        
        The body is streamed to a temporary file in the destination directory
        and renamed into place, so the destination is either fully replaced
        or left as it was. A symlinked destination is followed, and a replaced
        file keeps its mode, owner and group. The parent directory must exist.

        Args:
            bucket: Bucket name
            key: Object key in the bucket
            destination: Local file path to write
            
        Raises:
            StoreError: If the transfer fails
            OSError: If the local file cannot be written
        """
        # Write through symlinks so the link and the file it points at stay in place
        target = os.path.realpath(destination)
        directory = os.path.dirname(target)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.s3_resource-', suffix='.tmp')
        try:
            with os.fdopen(fd, 'wb') as tmp_file:
                try:
                    response = self.client.get_object(Bucket=bucket, Key=key)
                    shutil.copyfileobj(response['Body'], tmp_file)
                except (ClientError, BotoCoreError) as e:
                    raise self._to_store_error(e) from e
            # mkstemp creates 0600 files owned by us; keep mode and ownership of the replaced file
            if os.path.exists(target):
                st = os.stat(target)
                shutil.copymode(target, tmp_path)
                os.chown(tmp_path, st.st_uid, st.st_gid)
            else:
                os.chmod(tmp_path, DEFAULT_FILE_MODE)
            os.replace(tmp_path, target)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        
        logger.debug(f"Downloaded key: {key} from bucket: {bucket} to {destination}")
