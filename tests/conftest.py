"""Pytest fixtures for web UI construct and stack tests."""

import aws_cdk as cdk
import pytest

from simple_web_ui.config import SiteConfig

CERT_ARN = "arn:aws:acm:us-east-1:123456789012:certificate/abc"


@pytest.fixture
def app() -> cdk.App:
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Empty stack to host a single construct under test."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="us-east-1"))


@pytest.fixture
def site_config() -> SiteConfig:
  """Deployment using every option: aliases, API origin, API cache behavior."""
  return SiteConfig(
    name="dashboard",
    deployment_name="Dashboard",
    aliases=["app.example.com"],
    acm_certificate_arn=CERT_ARN,
    origins=[
      {
        "id": "api",
        "domain_name": "api.example.com",
        "custom_origin_config": {"origin_protocol_policy": "https-only"},
      }
    ],
    cache_behaviors=[
      {
        "path_pattern": "/api/*",
        "target_origin_id": "api",
        "viewer_protocol_policy": "https-only",
        "forwarded_values": {"query_string": True},
      }
    ],
    removal_policy=cdk.RemovalPolicy.DESTROY,
    owner="Web Team",
    email="web@example.com",
  )
