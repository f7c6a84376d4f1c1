"""RPC endpoint health check."""

import requests

from .exceptions import RpcUnavailableError


def check_rpc_health(rpc_url: str, timeout: float = 30) -> str:
    """
    Ask a Soroban RPC server whether it is ready to accept transactions.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        The reported status ("healthy")

    Raises:
        RpcUnavailableError: On network errors, HTTP errors, RPC errors or
                             any status other than "healthy"
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "getHealth",
                "id": 1,
            },
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise RpcUnavailableError(f"Network error reaching RPC at {rpc_url}: {e}") from e

    # Check for HTTP errors
    if response.status_code != 200:
        raise RpcUnavailableError(
            f"RPC request to {rpc_url} failed with status {response.status_code}"
        )

    try:
        result = response.json()
    except ValueError as e:
        raise RpcUnavailableError(f"RPC at {rpc_url} returned invalid JSON") from e

    # Check for RPC errors
    if "error" in result:
        raise RpcUnavailableError(f"RPC error: {result['error']}")

    status = result.get("result", {}).get("status")
    if status != "healthy":
        raise RpcUnavailableError(f"RPC at {rpc_url} reports status '{status}'")

    return status
