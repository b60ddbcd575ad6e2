"""
Configuration utilities.

Values are read from the environment, after loading an optional ``.env`` file
from the working directory. Command line flags take precedence over these.
"""
import os
from typing import Optional

import dotenv

dotenv.load_dotenv()

DEFAULT_PRICING_BASE_URL = "https://pricing.us-east-1.amazonaws.com"
DEFAULT_OUTPUT_PATH = "ec2_instance_types.go"
DEFAULT_PACKAGE_NAME = "aws"


def get_pricing_base_url() -> str:
    """
    Get the base URL of the pricing endpoint.

    Returns:
        str: Base URL without a trailing slash
    """
    return os.getenv("PRICING_BASE_URL", DEFAULT_PRICING_BASE_URL).rstrip("/")


def get_output_path() -> str:
    """Get the path of the generated Go source file."""
    return os.getenv("INSTANCE_TYPES_OUTPUT") or DEFAULT_OUTPUT_PATH


def get_package_name() -> str:
    """Get the Go package name written into the generated file."""
    return os.getenv("INSTANCE_TYPES_PACKAGE") or DEFAULT_PACKAGE_NAME


def get_request_timeout() -> Optional[float]:
    """
    Get the HTTP timeout for a single catalog request.

    Returns:
        Optional[float]: Timeout in seconds, or None to wait indefinitely

    Raises:
        ValueError: If PRICING_REQUEST_TIMEOUT is not a positive number
    """
    raw = os.getenv("PRICING_REQUEST_TIMEOUT")
    if not raw:
        return None
    timeout = float(raw)
    if timeout <= 0:
        raise ValueError("PRICING_REQUEST_TIMEOUT must be a positive number of seconds")
    return timeout
