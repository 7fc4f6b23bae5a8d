"""
Content fingerprints used to decide whether a local file matches a remote object.

The remote fingerprint is the object's ETag. For single-part uploads that is
the MD5 of the content; multipart uploads report a composite "<md5>-<parts>"
tag that never equals a file MD5, so such objects are always seen as changed.
"""
import hashlib

from loguru import logger


CHUNK_SIZE = 1024 * 1024


def file_md5(path: str) -> str:
    """Return the lowercase hex MD5 digest of a file's full contents."""
    digest = hashlib.md5()
    with open(path, 'rb') as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b''):
            digest.update(chunk)
    return digest.hexdigest()


def normalize_etag(etag: str) -> str:
    """Strip the quote characters an ETag carries in transit."""
    return etag.replace('"', '').lower()


def in_sync(local_path: str, remote_etag: str) -> bool:
    """
    Compare a local file against a remote ETag.

    Args:
        local_path: File to fingerprint
        remote_etag: ETag as reported by the store, quoted or not

    Returns:
        bool: True if the local MD5 equals the ETag
    """
    etag = normalize_etag(remote_etag)
    if '-' in etag:
        logger.debug(f"ETag {etag} is a multipart composite and cannot match a file digest")

    return file_md5(local_path) == etag
