"""
Kube Pod Sentinel - MCP Server for Kubernetes Pod Logs

A local MCP (Model Context Protocol) server that lets AI agents read
Kubernetes pod logs without exposing personal data. Every log is passed
through the PII masking engine before it leaves the server.

Tools:
    - pods_log: Get the (masked) logs of a pod

Safety Constraints:
    - At most 1000 log lines per call
    - Logs are always masked; there is no switch to turn masking off
"""

import logging
import os
from typing import Any

from dotenv import load_dotenv
from kubernetes import client, config
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException
from mcp.server.fastmcp import FastMCP

from pii_masking import mask_pii

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP(
    "kube-pod-sentinel",
    instructions="MCP Server for reading Kubernetes pod logs with PII masked"
)

# Safety constants
DEFAULT_TAIL_LINES = 100
MAX_TAIL_LINES = 1000
DEFAULT_NAMESPACE = "default"


def get_namespace(namespace: str = "") -> str:
    """Return the given namespace, or the configured default."""
    return namespace or os.getenv("KUBE_NAMESPACE", DEFAULT_NAMESPACE)


def get_core_v1_client() -> client.CoreV1Api:
    """
    Create a CoreV1 client from KUBECONFIG (and KUBE_CONTEXT, if set).

    Falls back to the in-cluster service account when no kubeconfig can be
    loaded, which is the case when the server itself runs in a pod.
    """
    try:
        config.load_kube_config(
            config_file=os.getenv("KUBECONFIG"),
            context=os.getenv("KUBE_CONTEXT") or None
        )
    except ConfigException:
        config.load_incluster_config()
    return client.CoreV1Api()


@mcp.tool()
def pods_log(
    name: str,
    namespace: str = "",
    container: str = "",
    tail: int = DEFAULT_TAIL_LINES,
    previous: bool = False
) -> dict[str, Any]:
    """
    Get the logs of a Kubernetes Pod in the current or provided namespace.

    Personal data in the logs (national IDs, emails, phone numbers, address
    numbers, card numbers, names after a name keyword) and bearer/JWT tokens
    are replaced with '*', one per character.

    Args:
        name: Name of the Pod to get the logs from.
        namespace: Namespace of the Pod. Defaults to KUBE_NAMESPACE or "default".
        container: Name of the Pod container (optional).
        tail: Number of lines to retrieve from the end of the logs (1-1000).
              Defaults to 100.
        previous: Return the logs of the previous terminated container.

    Returns:
        A dictionary containing:
        - status: "success" or "error"
        - pod, namespace, container: What was queried
        - tail_lines: Number of lines requested
        - redacted: True if anything was masked
        - logs: The masked log text

    Example usage:
        pods_log("api-7d9f8b6c5-x2k4q")
        pods_log("worker-0", namespace="jobs", tail=50, previous=True)
    """
    if not name:
        return {
            "status": "error",
            "message": "failed to get pod log, missing argument name"
        }

    namespace = get_namespace(namespace)

    # Enforce safety limit
    if tail < 1:
        tail = DEFAULT_TAIL_LINES
    if tail > MAX_TAIL_LINES:
        tail = MAX_TAIL_LINES

    try:
        api = get_core_v1_client()

        params = {"tail_lines": tail, "previous": previous}
        if container:
            params["container"] = container

        raw = api.read_namespaced_pod_log(name=name, namespace=namespace, **params)
        if not raw:
            raw = f"The pod {name} in namespace {namespace} has not logged any message yet"

        logs = mask_pii(raw)

        return {
            "status": "success",
            "pod": name,
            "namespace": namespace,
            "container": container or None,
            "tail_lines": tail,
            "redacted": logs != raw,
            "logs": logs
        }

    except ConfigException as e:
        logger.warning(f"Kubernetes configuration error: {e}")
        return {
            "status": "error",
            "pod": name,
            "namespace": namespace,
            "message": "Kubernetes configuration not found. Please set KUBECONFIG (and optionally KUBE_CONTEXT) environment variables."
        }
    except ApiException as e:
        logger.warning(f"Kubernetes API error for pod {namespace}/{name}: {e.status} {e.reason}")
        return {
            "status": "error",
            "pod": name,
            "namespace": namespace,
            "message": f"failed to get pod {name} log in namespace {namespace}: Kubernetes API Error ({e.status}): {e.reason}"
        }
    except Exception as e:
        logger.warning(f"Unexpected error for pod {namespace}/{name}: {e}")
        return {
            "status": "error",
            "pod": name,
            "namespace": namespace,
            "message": f"Unexpected error: {str(e)}"
        }


if __name__ == "__main__":
    # Run the MCP server using stdio transport
    mcp.run()
