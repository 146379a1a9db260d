"""
Tests for the command line entry point (cli.py)
"""

import json
from unittest.mock import patch

import pytest

from dynamodb_table_factory.cli import load_model, main
from dynamodb_table_factory.exceptions import ConflictError, RetryableError
from tests.helpers.models import Order


@pytest.fixture
def cli_env(monkeypatch):
    """Predictable configuration environment for CLI runs."""
    monkeypatch.setenv("ENVIRONMENT", "dev")
    monkeypatch.setenv("DYNAMODB_TABLE_PREFIX", "")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.delenv("DYNAMODB_BILLING_MODE", raising=False)


class TestLoadModel:
    """Test MODULE:CLASS resolution."""

    def test_load_model(self):
        assert load_model("tests.helpers.models:Order") is Order

    @pytest.mark.parametrize("target", ["tests.helpers.models", ":Order", "tests.helpers.models:"])
    def test_malformed_reference(self, target):
        with pytest.raises(ValueError, match="Expected MODULE:CLASS"):
            load_model(target)

    def test_missing_class(self):
        with pytest.raises(ValueError, match="has no attribute 'Missing'"):
            load_model("tests.helpers.models:Missing")


class TestMain:
    """Test printing and applying requests."""

    def test_print_raw_request(self, cli_env, capsys):
        """Test --raw prints the request without naming or billing settings."""
        assert main(["tests.helpers.models:Order", "--raw"]) == 0

        kwargs = json.loads(capsys.readouterr().out)
        assert kwargs['TableName'] == "Orders"
        assert kwargs['KeySchema'][0] == {'AttributeName': 'CustomerId', 'KeyType': 'HASH'}
        assert 'BillingMode' not in kwargs

    def test_print_configured_request(self, cli_env, capsys):
        exit_code = main([
            "tests.helpers.models:Shipment",
            "--prefix", "shop",
            "--environment", "staging",
            "--billing-mode", "PROVISIONED",
        ])

        assert exit_code == 0
        kwargs = json.loads(capsys.readouterr().out)
        assert kwargs['TableName'] == "shop_staging_Shipment"
        assert kwargs['BillingMode'] == "PROVISIONED"
        assert kwargs['ProvisionedThroughput'] == {'ReadCapacityUnits': 5, 'WriteCapacityUnits': 5}

    def test_definition_error_exit_code(self, cli_env, capsys):
        assert main(["tests.helpers.models:UnmarkedModel"]) == 1
        assert capsys.readouterr().out == ""

    def test_import_error_exit_code(self, cli_env):
        assert main(["no_such_module_anywhere:Model"]) == 1

    @pytest.mark.parametrize("target", ["tests.helpers.models:Annotated", "tests.helpers.models:Decimal"])
    def test_not_a_model_exit_code(self, cli_env, capsys, caplog, target):
        """Test a reference to something that is not a model exits with 1."""
        assert main([target]) == 1
        assert capsys.readouterr().out == ""
        assert "expected a pydantic model or a dataclass" in caplog.text

    def test_apply_creates_table(self, cli_env, mock_dynamodb_client):
        """Test --apply creates the configured table and is safe to repeat."""
        assert main(["tests.helpers.models:Shipment", "--apply"]) == 0
        assert main(["tests.helpers.models:Shipment", "--apply"]) == 0

        tables = mock_dynamodb_client.list_tables()['TableNames']
        assert tables == ["dev_Shipment"]

    def test_retryable_error_exit_code(self, cli_env):
        """Test throttling during --apply exits with 2."""
        with patch(
            "dynamodb_table_factory.cli.TableProvisioner.ensure_table",
            side_effect=RetryableError("Throttling - CreateTable on dev_Shipment: slow down"),
        ):
            assert main(["tests.helpers.models:Shipment", "--apply"]) == 2

    def test_conflict_exit_code(self, cli_env):
        with patch(
            "dynamodb_table_factory.cli.TableProvisioner.ensure_table",
            side_effect=ConflictError("Table already exists", "dev_Shipment"),
        ):
            assert main(["tests.helpers.models:Shipment", "--apply"]) == 1
