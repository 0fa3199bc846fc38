"""Lazily created clients, reused for the lifetime of the app process."""

from functools import lru_cache
from typing import Any

import boto3
import httpx

from planner.config import get_config


@lru_cache(maxsize=1)
def get_http_client() -> httpx.AsyncClient:
    config = get_config()
    return httpx.AsyncClient(base_url=config.api_base_url, timeout=config.api_timeout_seconds)


@lru_cache(maxsize=1)
def get_dynamo_client() -> Any:
    config = get_config()
    return boto3.client("dynamodb", region_name=config.aws_region, endpoint_url=config.dynamodb_endpoint)
