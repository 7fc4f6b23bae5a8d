"""
Pytest configuration and fixtures for the S3 file resource tests.
"""
import hashlib
import pytest
import yaml
from unittest.mock import Mock

from s3_resource.models.config import ClientConfig
from s3_resource.models.data_models import ObjectMetadata, ResourceSpec


@pytest.fixture
def sample_file_content():
    """Sample object content for testing."""
    return b"This is test file content for reconciliation testing."


@pytest.fixture
def sample_etag(sample_file_content):
    """Quoted ETag matching sample_file_content, as S3 reports it."""
    return '"%s"' % hashlib.md5(sample_file_content).hexdigest()


@pytest.fixture
def client_config():
    """A complete AWS client configuration."""
    return ClientConfig(
        access_key_id='test_key',
        secret_access_key='test_secret',
        region='eu-west-1'
    )


@pytest.fixture
def target_path(tmp_path):
    """Absolute path of the managed local file (not created)."""
    return str(tmp_path / 'managed' / 'readme.txt')


@pytest.fixture
def make_spec(target_path):
    """Factory for resource specs with valid explicit credentials."""
    def _make_spec(**overrides):
        params = {
            'path': target_path,
            'source': '/bucket1/readme.txt',
            'access_key_id': 'test_key',
            'secret_access_key': 'test_secret',
            'region': 'eu-west-1',
        }
        params.update(overrides)
        return ResourceSpec(**params)
    return _make_spec


@pytest.fixture
def write_fallback(tmp_path):
    """Write aws_config.yaml beside a main config file and return the main config path."""
    def _write_fallback(data):
        config_dir = tmp_path / 'etc'
        config_dir.mkdir(exist_ok=True)
        main_config = config_dir / 'agent.conf'
        main_config.write_text('[main]\n')
        fallback = config_dir / 'aws_config.yaml'
        if isinstance(data, str):
            fallback.write_text(data)
        else:
            fallback.write_text(yaml.safe_dump(data))
        return str(main_config)
    return _write_fallback


@pytest.fixture
def fake_store(sample_file_content, sample_etag):
    """Store client mock whose get() writes sample_file_content to the destination."""
    store = Mock()
    store.head.return_value = ObjectMetadata(etag=sample_etag, size=len(sample_file_content))

    def _get(bucket, key, destination):
        with open(destination, 'wb') as f:
            f.write(sample_file_content)

    store.get.side_effect = _get
    return store


@pytest.fixture
def store_factory(fake_store):
    """Factory returning fake_store, recording the configs it was built with."""
    return Mock(return_value=fake_store)
