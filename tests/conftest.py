"""
Test configuration and fixtures for the DynamoDB table factory.

Provides configurations and a moto-backed DynamoDB client for provisioning tests.
"""

import boto3
import pytest
from moto import mock_aws

from dynamodb_table_factory import DynamoDBConfig


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake AWS credentials so nothing can reach a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test_key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test_secret")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)


@pytest.fixture
def dynamodb_config():
    """Configuration for request building tests."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,
        environment="test",
        table_prefix="myapp",
        billing_mode="PAY_PER_REQUEST",
    )


@pytest.fixture
def mock_dynamodb_config(aws_credentials):
    """Configuration for mocked provisioning (default endpoint for moto)."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,
        environment="test",
        table_prefix="",
        billing_mode="PAY_PER_REQUEST",
    )


@pytest.fixture
def mock_dynamodb_client(aws_credentials):
    """Mocked DynamoDB client; all boto3 calls inside the fixture hit moto."""
    with mock_aws():
        yield boto3.client('dynamodb', region_name='us-east-1')
