#!/usr/bin/env python3
"""
Basic usage examples for the api_client_manager library.

This script demonstrates how SDKs share GraphQL clients through the client
manager, using an explicit endpoint, a configuration document and an auth
source.
"""

import asyncio

from api_client_manager import (
    ApiClientManager,
    CallableTokenSource,
    ConfigurationNotSetError,
    ConfigurationStore,
    GraphQLQuery,
    LoggingConfig,
    setup_logging,
)

CONFIG_DOCUMENT = """
{
    "apiService": {"apiUrl": "https://api.example.com/graphql", "region": "us-east-1"},
    "identityService": {"apiUrl": "https://identity.example.com/graphql", "region": "us-east-1"},
    "mirrorService": {"apiUrl": "https://api.example.com/graphql", "region": "us-east-1"}
}
"""


async def latest_token() -> str:
    """Stand-in for a session lookup that refreshes tokens."""
    return "example-token"


def example_client_sharing() -> None:
    """Example: Clients are built once per distinct endpoint."""
    print("=== Client Sharing Example ===\n")

    store = ConfigurationStore()
    store.set_config(CONFIG_DOCUMENT)
    manager = ApiClientManager(store=store).set_auth_source(CallableTokenSource(latest_token))

    default = manager.get_client()
    mirror = manager.get_client(config_namespace="mirrorService")
    identity = manager.get_client(config_namespace="identityService")

    print(f"Default endpoint: {default.endpoint}")
    print(f"Identity endpoint: {identity.endpoint}")
    print(f"Mirror shares default client: {mirror is default}")
    print(f"Cached clients: {sorted(manager.clients)}\n")


def example_explicit_config() -> None:
    """Example: An explicit default overrides the configuration document."""
    print("=== Explicit Configuration Example ===\n")

    manager = ApiClientManager(store=ConfigurationStore())
    try:
        manager.get_client()
    except ConfigurationNotSetError as e:
        print(f"Before configuration: {e}")

    manager.set_config({"apiUrl": "https://staging.example.com/graphql", "region": "eu-west-1"})
    manager.set_auth_source(CallableTokenSource(latest_token))
    client = manager.get_client(disable_offline=True, timeout=10.0)

    print(f"Client endpoint: {client.endpoint}")
    print(f"Local store disabled: {client.config.disable_offline}\n")


async def example_query() -> None:
    """Example: Run a query and reset every local store."""
    print("=== Query Example ===\n")

    manager = ApiClientManager(store=ConfigurationStore())
    manager.set_config({"apiUrl": "https://countries.trevorblades.com/", "region": "global"})
    manager.set_auth_source(CallableTokenSource(latest_token))

    client = manager.get_client()
    query = GraphQLQuery(query="{ countries { code name } }")
    try:
        result = await client.execute(query)
        print(f"Success: {result.success}")
        print(f"Countries: {len(result.get_data('countries') or [])}")
        print(f"Response time: {result.response_time:.2f}s")

        cached = await client.execute(query)
        print(f"Second call from local store: {cached.from_cache}")

        await manager.reset()
        print(f"Entries after reset: {len(client.cache)}\n")
    except Exception as e:
        print(f"Query failed: {e}\n")
    finally:
        await manager.close()


async def main() -> None:
    """Run all examples."""
    setup_logging(LoggingConfig())

    example_client_sharing()
    example_explicit_config()
    await example_query()


if __name__ == "__main__":
    asyncio.run(main())
