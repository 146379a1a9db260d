"""
Table Provisioner

Submits CreateTable requests to DynamoDB through boto3. This is the only
component that talks to the store; extraction and request building stay pure.

The provisioner only creates tables. It never compares an existing table
with a model or alters one: ``ensure_table`` skips tables that already exist.
"""

import logging
from typing import Any, Dict, Optional, Union

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError, WaiterError

from ..config import DynamoDBConfig
from ..exceptions import (
    ConflictError,
    ConnectionError,
    NotFoundError,
    RetryableError,
    ValidationError,
)
from ..models.descriptors import TypeDescriptor
from ..models.requests import CreateTableRequest
from .request_builder import generate_create_table_request

logger = logging.getLogger(__name__)


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str
) -> Exception:
    """Map a DynamoDB ClientError to a table factory exception.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "CreateTable")
        table_name: The DynamoDB table name

    Returns:
        Appropriate domain exception
    """
    error_code = error.response['Error']['Code']
    error_message = error.response['Error']['Message']

    full_message = f"{operation} on {table_name}: {error_message}"

    if error_code in ['ResourceInUseException', 'TableAlreadyExistsException']:
        return ConflictError(f"Table already exists or is in use - {full_message}", table_name, original_error=error)

    elif error_code in ['ResourceNotFoundException', 'TableNotFoundException']:
        return NotFoundError(f"Table not found - {full_message}", 'table', table_name, original_error=error)

    elif error_code == 'ValidationException':
        return ValidationError(f"Validation failed - {full_message}", original_error=error)

    elif error_code == 'LimitExceededException':
        return ValidationError(f"DynamoDB limit exceeded - {full_message}", original_error=error)

    elif error_code in [
        'ProvisionedThroughputExceededException', 'RequestLimitExceeded',
        'ThrottlingException', 'TooManyRequestsException'
    ]:
        return RetryableError(f"Throttling - {full_message}", original_error=error)

    elif error_code in ['InternalServerError', 'ServiceUnavailable', 'ServiceUnavailableException']:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error)

    elif error_code in ['UnrecognizedClientException', 'AccessDeniedException']:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    elif error_code in ['InvalidEndpointException', 'IncompleteSignatureException', 'InvalidSignatureException']:
        return ConnectionError(f"Invalid endpoint or signature - {full_message}", original_error=error)

    elif error_code in ['ExpiredTokenException', 'TokenRefreshRequiredException']:
        return ConnectionError(f"Token expired - {full_message}", original_error=error)

    # Default to ConnectionError for unknown errors
    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


class TableProvisioner:
    """
    Creates DynamoDB tables from CreateTable requests.

    The boto3 client is created lazily from the configuration on first use.
    """

    def __init__(self, config: Optional[DynamoDBConfig] = None):
        """Initialize the provisioner.

        Args:
            config: DynamoDB configuration (defaults to environment configuration)
        """
        self.config = config or DynamoDBConfig.from_env()
        self._client = None

    @property
    def client(self):
        """Lazy initialization of the DynamoDB client."""
        if self._client is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    region_name=self.config.region_name
                )

                client_config = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    client_config['endpoint_url'] = self.config.endpoint_url

                client_config['config'] = Config(
                    retries={'max_attempts': self.config.retries},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )

                self._client = session.client('dynamodb', **client_config)
            except Exception as e:
                logger.error(f"Failed to create DynamoDB client: {e}")
                raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e) from e
        return self._client

    def table_exists(self, table_name: str) -> bool:
        """Check whether a table exists.

        Args:
            table_name: Physical table name

        Returns:
            True if DescribeTable finds the table
        """
        try:
            self.client.describe_table(TableName=table_name)
            return True
        except ClientError as e:
            if e.response['Error']['Code'] == 'ResourceNotFoundException':
                return False
            raise map_dynamodb_error(e, "DescribeTable", table_name) from e

    def create_table(self, request: CreateTableRequest) -> Dict[str, Any]:
        """
        Create a table from a request.

        Waits for the table to exist when ``config.wait_for_active`` is set.

        Args:
            request: The CreateTable request

        Returns:
            The TableDescription returned by DynamoDB

        Raises:
            ConflictError: If the table already exists
            ValidationError: If DynamoDB rejects the request
            RetryableError: If the table does not become active while waiting
        """
        kwargs = request.to_boto3_kwargs()
        try:
            response = self.client.create_table(**kwargs)
            logger.info(f"Created table {request.table_name}")

            if self.config.wait_for_active:
                self.client.get_waiter('table_exists').wait(TableName=request.table_name)
                logger.info(f"Table {request.table_name} is active")

            return response['TableDescription']
        except ClientError as e:
            raise map_dynamodb_error(e, "CreateTable", request.table_name) from e
        except WaiterError as e:
            logger.error(f"Table {request.table_name} did not become active: {e}")
            raise RetryableError(
                f"Table {request.table_name} was created but did not become active: {e}",
                original_error=e
            ) from e

    def ensure_table(self, request: CreateTableRequest) -> bool:
        """Create the table unless it already exists.

        Args:
            request: The CreateTable request

        Returns:
            True if the table was created, False if it already existed
        """
        if self.table_exists(request.table_name):
            logger.info(f"Table {request.table_name} already exists, skipping creation")
            return False
        self.create_table(request)
        return True

    def create_table_for_model(self, source: Union[TypeDescriptor, type]) -> Dict[str, Any]:
        """Extract, build and create the table for a model.

        The provisioner's configuration supplies the table name prefix and
        billing settings.

        Args:
            source: Pydantic model, dataclass or TypeDescriptor

        Returns:
            The TableDescription returned by DynamoDB
        """
        request = generate_create_table_request(source, self.config)
        return self.create_table(request)


def create_table_provisioner(config: Optional[DynamoDBConfig] = None) -> TableProvisioner:
    """
    Factory function to create a TableProvisioner instance.

    Args:
        config: DynamoDB configuration (defaults to environment configuration)

    Returns:
        Configured TableProvisioner instance
    """
    return TableProvisioner(config)
