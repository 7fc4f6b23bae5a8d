"""
Tests for local/remote fingerprint comparison.
"""
import hashlib
import pytest

from s3_resource.services.digest import file_md5, in_sync, normalize_etag


@pytest.fixture
def local_file(tmp_path, sample_file_content):
    path = tmp_path / 'file.txt'
    path.write_bytes(sample_file_content)
    return str(path)


def test_file_md5(local_file, sample_file_content):
    """Test that the digest covers the full file content."""
    assert file_md5(local_file) == hashlib.md5(sample_file_content).hexdigest()


def test_file_md5_large_file(tmp_path):
    """Test digests of files larger than one read chunk."""
    content = b'x' * (3 * 1024 * 1024 + 17)
    path = tmp_path / 'large.bin'
    path.write_bytes(content)
    
    assert file_md5(str(path)) == hashlib.md5(content).hexdigest()


def test_normalize_etag():
    """Test that quotes are stripped from ETags."""
    assert normalize_etag('"ABC123"') == 'abc123'
    assert normalize_etag('abc123') == 'abc123'


def test_in_sync_quoted_etag(local_file, sample_etag):
    """Test that a quoted ETag equal to the local MD5 is in sync."""
    assert in_sync(local_file, sample_etag) is True


def test_in_sync_unquoted_etag(local_file, sample_etag):
    """Test that the comparison also accepts an unquoted ETag."""
    assert in_sync(local_file, sample_etag.strip('"')) is True


def test_out_of_sync(local_file):
    """Test that a different ETag is out of sync."""
    assert in_sync(local_file, '"e"') is False


def test_multipart_etag_never_in_sync(local_file, sample_file_content):
    """Test that composite multipart ETags are compared as-is."""
    etag = '"%s-2"' % hashlib.md5(sample_file_content).hexdigest()
    
    assert in_sync(local_file, etag) is False


def test_missing_local_file(tmp_path):
    """Test that filesystem errors propagate."""
    with pytest.raises(FileNotFoundError):
        in_sync(str(tmp_path / 'missing.txt'), '"abc"')
