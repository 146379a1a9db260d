"""
Tests for TableProvisioner (core/table_provisioner.py)

Client construction is tested with a patched boto3 session; table creation
runs against moto's in-memory DynamoDB.
"""

from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError, WaiterError

from dynamodb_table_factory import DynamoDBConfig
from dynamodb_table_factory.core.request_builder import generate_create_table_request
from dynamodb_table_factory.core.table_provisioner import TableProvisioner, create_table_provisioner
from dynamodb_table_factory.exceptions import ConflictError, ConnectionError, RetryableError, ValidationError
from tests.helpers.models import PipelineRun, Shipment


@pytest.fixture
def mock_config():
    """Mock configuration for testing."""
    return DynamoDBConfig(
        region_name="us-east-1",
        table_prefix="test",
        environment="dev",
        aws_access_key_id="fake_key",
        aws_secret_access_key="fake_secret",
        endpoint_url="http://localhost:8000",
    )


class TestClientInitialization:
    """Test lazy client creation."""

    def test_initialization(self, mock_config):
        provisioner = TableProvisioner(mock_config)

        assert provisioner.config == mock_config
        assert provisioner._client is None

    def test_factory(self, mock_config):
        provisioner = create_table_provisioner(mock_config)

        assert isinstance(provisioner, TableProvisioner)
        assert provisioner.config == mock_config

    def test_client_lazy_initialization(self, mock_config):
        """Test the client is built once from a session with the configured endpoint."""
        with patch('boto3.Session') as mock_session_class:
            mock_session = Mock()
            mock_client = Mock()
            mock_session_class.return_value = mock_session
            mock_session.client.return_value = mock_client

            provisioner = TableProvisioner(mock_config)

            assert provisioner.client == mock_client
            assert provisioner.client == mock_client

            mock_session_class.assert_called_once_with(
                aws_access_key_id="fake_key",
                aws_secret_access_key="fake_secret",
                region_name="us-east-1"
            )
            mock_session.client.assert_called_once()
            args, kwargs = mock_session.client.call_args
            assert args == ('dynamodb',)
            assert kwargs['endpoint_url'] == "http://localhost:8000"
            assert kwargs['region_name'] == "us-east-1"

    def test_client_creation_failure(self, mock_config):
        """Test session failures become ConnectionError."""
        with patch('boto3.Session', side_effect=Exception("no credentials")):
            provisioner = TableProvisioner(mock_config)

            with pytest.raises(ConnectionError, match="Failed to connect to DynamoDB"):
                provisioner.client


class TestCreateTableWithMockClient:
    """Test error handling with a mocked client."""

    def test_validation_error_mapped(self, mock_config):
        provisioner = TableProvisioner(mock_config)
        provisioner._client = Mock()
        provisioner._client.create_table.side_effect = ClientError(
            {'Error': {'Code': 'ValidationException', 'Message': 'Some AttributeDefinitions are not used'}},
            'CreateTable'
        )

        request = generate_create_table_request(Shipment, mock_config)

        with pytest.raises(ValidationError, match="not used"):
            provisioner.create_table(request)

    def test_create_table_passes_kwargs(self, mock_config):
        """Test the rendered request is passed through unchanged."""
        mock_config.wait_for_active = False
        provisioner = TableProvisioner(mock_config)
        provisioner._client = Mock()
        provisioner._client.create_table.return_value = {'TableDescription': {'TableName': 'test_dev_Shipment'}}

        request = generate_create_table_request(Shipment, mock_config)
        description = provisioner.create_table(request)

        provisioner._client.create_table.assert_called_once_with(**request.to_boto3_kwargs())
        provisioner._client.get_waiter.assert_not_called()
        assert description == {'TableName': 'test_dev_Shipment'}

    def test_waiter_timeout_is_retryable(self, mock_config):
        """Test a table that never becomes active raises RetryableError."""
        provisioner = TableProvisioner(mock_config)
        provisioner._client = Mock()
        provisioner._client.create_table.return_value = {'TableDescription': {'TableName': 'test_dev_Shipment'}}
        waiter_error = WaiterError('TableExists', 'Max attempts exceeded', {})
        provisioner._client.get_waiter.return_value.wait.side_effect = waiter_error

        request = generate_create_table_request(Shipment, mock_config)

        with pytest.raises(RetryableError, match="did not become active") as exc_info:
            provisioner.create_table(request)

        assert exc_info.value.retryable is True
        assert exc_info.value.original_error is waiter_error
        provisioner._client.get_waiter.assert_called_once_with('table_exists')

    def test_describe_failure_is_mapped(self, mock_config):
        provisioner = TableProvisioner(mock_config)
        provisioner._client = Mock()
        provisioner._client.describe_table.side_effect = ClientError(
            {'Error': {'Code': 'AccessDeniedException', 'Message': 'denied'}},
            'DescribeTable'
        )

        with pytest.raises(ConnectionError, match="Authentication"):
            provisioner.table_exists("anything")


class TestCreateTableWithMoto:
    """Test table creation against moto."""

    def test_create_table_for_model(self, mock_dynamodb_client, mock_dynamodb_config):
        """Test a model with every key role becomes a real table."""
        provisioner = TableProvisioner(mock_dynamodb_config)

        description = provisioner.create_table_for_model(PipelineRun)

        assert description['TableName'] == "test_pipeline_runs"

        table = mock_dynamodb_client.describe_table(TableName="test_pipeline_runs")['Table']
        assert table['KeySchema'] == [
            {'AttributeName': 'pipeline_id', 'KeyType': 'HASH'},
            {'AttributeName': 'run_id', 'KeyType': 'RANGE'},
        ]
        assert [gsi['IndexName'] for gsi in table['GlobalSecondaryIndexes']] == ['StatusRunsIndex']
        assert [lsi['IndexName'] for lsi in table['LocalSecondaryIndexes']] == ['DurationIndex']

    def test_table_exists(self, mock_dynamodb_client, mock_dynamodb_config):
        provisioner = TableProvisioner(mock_dynamodb_config)

        assert provisioner.table_exists("test_Shipment") is False

        provisioner.create_table(generate_create_table_request(Shipment, mock_dynamodb_config))

        assert provisioner.table_exists("test_Shipment") is True

    def test_ensure_table_creates_once(self, mock_dynamodb_client, mock_dynamodb_config):
        provisioner = TableProvisioner(mock_dynamodb_config)
        request = generate_create_table_request(Shipment, mock_dynamodb_config)

        assert provisioner.ensure_table(request) is True
        assert provisioner.ensure_table(request) is False

    def test_create_existing_table_conflicts(self, mock_dynamodb_client, mock_dynamodb_config):
        provisioner = TableProvisioner(mock_dynamodb_config)
        request = generate_create_table_request(Shipment, mock_dynamodb_config)

        provisioner.create_table(request)

        with pytest.raises(ConflictError) as exc_info:
            provisioner.create_table(request)

        assert exc_info.value.resource_id == "test_Shipment"

    def test_provisioned_table(self, mock_dynamodb_client, mock_dynamodb_config):
        """Test PROVISIONED billing sets throughput on the created table."""
        mock_dynamodb_config.billing_mode = "PROVISIONED"
        mock_dynamodb_config.read_capacity_units = 7
        mock_dynamodb_config.write_capacity_units = 3
        provisioner = TableProvisioner(mock_dynamodb_config)

        provisioner.create_table_for_model(Shipment)

        table = mock_dynamodb_client.describe_table(TableName="test_Shipment")['Table']
        assert table['ProvisionedThroughput']['ReadCapacityUnits'] == 7
        assert table['ProvisionedThroughput']['WriteCapacityUnits'] == 3
