"""Shared fixtures for integration tests against a real DynamoDB.

All integration tests are skipped unless DYNAMODB_ENDPOINT is set. This
allows the test suite to run in CI without a database while supporting local
testing against DynamoDB Local (``docker run -p 8000:8000 amazon/dynamodb-local``).

Required env vars:
    DYNAMODB_ENDPOINT       — e.g., http://localhost:8000

Optional env vars:
    AWS_REGION              — defaults to us-west-2
"""

from __future__ import annotations

import os
import uuid

import aioboto3
import pytest
import pytest_asyncio

from session_tokens.config import Settings, override_settings

pytestmark = pytest.mark.integration


@pytest.fixture(scope="session")
def dynamodb_env():
    """Return DynamoDB connection settings or skip."""
    endpoint = os.environ.get("DYNAMODB_ENDPOINT")
    if not endpoint:
        pytest.skip("Integration tests require DYNAMODB_ENDPOINT")
    # DynamoDB Local accepts any credentials
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "local")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "local")
    return {
        "endpoint": endpoint,
        "region": os.environ.get("AWS_REGION", "us-west-2"),
    }


@pytest_asyncio.fixture
async def table_name(dynamodb_env):
    """Create a throwaway sessions table and drop it afterwards."""
    name = f"session_tokens_{uuid.uuid4().hex[:8]}"
    session = aioboto3.Session()
    async with session.resource(
        "dynamodb",
        endpoint_url=dynamodb_env["endpoint"],
        region_name=dynamodb_env["region"],
    ) as dynamodb:
        table = await dynamodb.create_table(
            TableName=name,
            KeySchema=[{"AttributeName": "session_id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "session_id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        await table.wait_until_exists()
        yield name
        await table.delete()


@pytest.fixture
def real_settings(dynamodb_env, table_name):
    s = Settings(
        session_key="integration-test-secret",
        session_store="dynamodb",
        dynamodb_table=table_name,
        dynamodb_endpoint=dynamodb_env["endpoint"],
        aws_region=dynamodb_env["region"],
    )
    override_settings(s)
    return s
