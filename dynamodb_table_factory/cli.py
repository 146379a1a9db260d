#!/usr/bin/env python3
"""
DynamoDB Table Factory command line

Prints the CreateTable request for a model, or creates the table.

Usage:
    dynamodb-table-factory myapp.models:Order
    dynamodb-table-factory myapp.models:Order --prefix myapp --environment staging
    dynamodb-table-factory myapp.models:Order --apply

Exit codes: 0 on success, 1 on errors, 2 when DynamoDB throttled or was
unavailable and the command can be retried.
"""

import argparse
import importlib
import json
import logging
import sys
from typing import List, Optional

from .config import DynamoDBConfig
from .core import TableProvisioner, generate_create_table_request
from .exceptions import DynamoDBTableFactoryError

logger = logging.getLogger(__name__)


def load_model(target: str) -> type:
    """Import a model class from a ``module:ClassName`` reference."""
    module_name, sep, class_name = target.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"Expected MODULE:CLASS, got '{target}'")

    module = importlib.import_module(module_name)
    try:
        return getattr(module, class_name)
    except AttributeError:
        raise ValueError(f"Module '{module_name}' has no attribute '{class_name}'") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dynamodb-table-factory",
        description="Generate DynamoDB CreateTable requests from annotated models",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "model",
        help="Model reference as MODULE:CLASS"
    )

    parser.add_argument(
        "--apply",
        action="store_true",
        help="Create the table instead of printing the request"
    )

    parser.add_argument(
        "--prefix",
        help="Table name prefix (overrides DYNAMODB_TABLE_PREFIX)"
    )

    parser.add_argument(
        "--environment",
        choices=["dev", "test", "staging", "prod"],
        help="Environment used in the table name (overrides ENVIRONMENT)"
    )

    parser.add_argument(
        "--billing-mode",
        choices=["PAY_PER_REQUEST", "PROVISIONED"],
        help="Billing mode (overrides DYNAMODB_BILLING_MODE)"
    )

    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the request without applying prefix, environment or billing settings"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = DynamoDBConfig.from_env()
        if args.prefix is not None:
            config.table_prefix = args.prefix
        if args.environment:
            config.environment = args.environment
        if args.billing_mode:
            config.billing_mode = args.billing_mode
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.debug or config.enable_debug_logging else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        model_class = load_model(args.model)
        # Tables are always created with the configured name and billing
        raw = args.raw and not args.apply
        request = generate_create_table_request(model_class, None if raw else config)

        if args.apply:
            created = TableProvisioner(config).ensure_table(request)
            if not created:
                logger.info(f"Table {request.table_name} already exists")
        else:
            print(json.dumps(request.to_boto3_kwargs(), indent=2))

    except (ImportError, ValueError, TypeError) as e:
        logger.error(f"Cannot load model '{args.model}': {e}")
        return 1

    except DynamoDBTableFactoryError as e:
        logger.error(str(e))
        return 2 if e.retryable else 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
