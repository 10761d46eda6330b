"""
boto3 client construction shared by the Bedrock and Data API adapters
"""
from typing import Optional

import boto3
from botocore.config import Config

from .config import get_settings


def create_client(service_name: str, endpoint_url: Optional[str] = None):
    """Create a boto3 client for the configured region (clients are thread-safe)"""
    settings = get_settings()

    config = {
        "region_name": settings.aws_region,
        "config": Config(
            connect_timeout=settings.aws_connect_timeout,
            read_timeout=settings.aws_read_timeout,
            retries={"max_attempts": settings.aws_max_attempts, "mode": "standard"},
        ),
    }

    if endpoint_url:
        config["endpoint_url"] = endpoint_url

    return boto3.client(service_name, **config)
