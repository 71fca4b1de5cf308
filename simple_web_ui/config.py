"""Configuration loader for single-page application deployments."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy
from aws_cdk import aws_cloudfront as cloudfront

_Cfn = cloudfront.CfnDistribution

# Plain (scalar or list) keys accepted for each property type
_ORIGIN_KEYS = {
  "id",
  "domain_name",
  "origin_path",
  "connection_attempts",
  "connection_timeout",
  "origin_access_control_id",
}
_ORIGIN_SHIELD_KEYS = {"enabled", "origin_shield_region"}
_VPC_ORIGIN_KEYS = {
  "vpc_origin_id",
  "owner_account_id",
  "origin_keepalive_timeout",
  "origin_read_timeout",
}
_CUSTOM_ORIGIN_KEYS = {
  "origin_protocol_policy",
  "http_port",
  "https_port",
  "origin_keepalive_timeout",
  "origin_read_timeout",
  "origin_ssl_protocols",
}
_S3_ORIGIN_KEYS = {"origin_access_identity"}
_HEADER_KEYS = {"header_name", "header_value"}
_CACHE_BEHAVIOR_KEYS = {
  "path_pattern",
  "target_origin_id",
  "viewer_protocol_policy",
  "allowed_methods",
  "cached_methods",
  "cache_policy_id",
  "origin_request_policy_id",
  "response_headers_policy_id",
  "compress",
  "min_ttl",
  "default_ttl",
  "max_ttl",
  "smooth_streaming",
  "field_level_encryption_id",
  "realtime_log_config_arn",
  "trusted_key_groups",
  "trusted_signers",
}
_FUNCTION_ASSOCIATION_KEYS = {"event_type", "function_arn"}
_LAMBDA_ASSOCIATION_KEYS = {"event_type", "lambda_function_arn", "include_body"}
_FORWARDED_VALUES_KEYS = {"query_string", "headers", "query_string_cache_keys"}
_COOKIES_KEYS = {"forward", "whitelisted_names"}

_REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


def _build(
  kind: str,
  data: Mapping[str, Any],
  factory: Callable[..., Any],
  keys: set[str],
  nested: Mapping[str, Callable[[Any], Any]] | None = None,
) -> Any:
  """Create a CloudFormation property object from a snake_case mapping."""
  if not isinstance(data, Mapping):
    raise ValueError(f"{kind} must be a mapping, got {type(data).__name__}")

  nested = nested or {}
  kwargs: dict[str, Any] = {}
  for key, value in data.items():
    if key in nested:
      kwargs[key] = nested[key](value)
    elif key in keys:
      kwargs[key] = value
    else:
      raise ValueError(f"Unknown {kind} key: {key}")
  try:
    return factory(**kwargs)
  except TypeError as e:
    # Missing required properties surface as TypeError from jsii
    raise ValueError(f"Invalid {kind}: {e}") from e


def _build_list(kind: str, data: Any, build: Callable[[Any], Any]) -> list[Any]:
  if not isinstance(data, list):
    raise ValueError(f"{kind} must be a list, got {type(data).__name__}")
  return [build(item) for item in data]


def _string_list(kind: str, value: Any) -> list[str] | None:
  """Accept a single string where a list of strings is expected."""
  if value is None:
    return None
  if isinstance(value, str):
    return [value]
  if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
    raise ValueError(f"{kind} must be a string or a list of strings")
  return value


def origin_from_dict(data: Mapping[str, Any]) -> _Cfn.OriginProperty:
  """Convert a YAML origin mapping to an ``OriginProperty``."""
  return _build(
    "origin",
    data,
    _Cfn.OriginProperty,
    _ORIGIN_KEYS,
    nested={
      "custom_origin_config": lambda v: _build(
        "custom_origin_config", v, _Cfn.CustomOriginConfigProperty, _CUSTOM_ORIGIN_KEYS
      ),
      "s3_origin_config": lambda v: _build(
        "s3_origin_config", v, _Cfn.S3OriginConfigProperty, _S3_ORIGIN_KEYS
      ),
      "origin_custom_headers": lambda v: _build_list(
        "origin_custom_headers",
        v,
        lambda h: _build(
          "origin_custom_header", h, _Cfn.OriginCustomHeaderProperty, _HEADER_KEYS
        ),
      ),
      "origin_shield": lambda v: _build(
        "origin_shield", v, _Cfn.OriginShieldProperty, _ORIGIN_SHIELD_KEYS
      ),
      "vpc_origin_config": lambda v: _build(
        "vpc_origin_config", v, _Cfn.VpcOriginConfigProperty, _VPC_ORIGIN_KEYS
      ),
    },
  )


def cache_behavior_from_dict(data: Mapping[str, Any]) -> _Cfn.CacheBehaviorProperty:
  """Convert a YAML cache behavior mapping to a ``CacheBehaviorProperty``."""
  return _build(
    "cache_behavior",
    data,
    _Cfn.CacheBehaviorProperty,
    _CACHE_BEHAVIOR_KEYS,
    nested={
      "forwarded_values": lambda v: _build(
        "forwarded_values",
        v,
        _Cfn.ForwardedValuesProperty,
        _FORWARDED_VALUES_KEYS,
        nested={
          "cookies": lambda c: _build("cookies", c, _Cfn.CookiesProperty, _COOKIES_KEYS),
        },
      ),
      "function_associations": lambda v: _build_list(
        "function_associations",
        v,
        lambda a: _build(
          "function_association",
          a,
          _Cfn.FunctionAssociationProperty,
          _FUNCTION_ASSOCIATION_KEYS,
        ),
      ),
      "lambda_function_associations": lambda v: _build_list(
        "lambda_function_associations",
        v,
        lambda a: _build(
          "lambda_function_association",
          a,
          _Cfn.LambdaFunctionAssociationProperty,
          _LAMBDA_ASSOCIATION_KEYS,
        ),
      ),
    },
  )


@dataclass
class SiteConfig:
  """Configuration for a single deployment."""

  name: str
  deployment_name: str | None = None
  aliases: list[str] | None = None
  acm_certificate_arn: str | None = None
  origins: list[dict[str, Any]] = field(default_factory=list)
  cache_behaviors: list[dict[str, Any]] = field(default_factory=list)
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  owner: str | None = None
  email: str | None = None
  region: str = "us-east-1"

  def origin_properties(self) -> list[_Cfn.OriginProperty] | None:
    if not self.origins:
      return None
    return [origin_from_dict(o) for o in self.origins]

  def cache_behavior_properties(self) -> list[_Cfn.CacheBehaviorProperty] | None:
    if not self.cache_behaviors:
      return None
    return [cache_behavior_from_dict(b) for b in self.cache_behaviors]


@dataclass
class Config:
  """Multi-deployment configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    if not isinstance(data, Mapping):
      raise ValueError(f"{path}: top level must be a mapping")

    defaults = data.get("defaults") or {}
    if not isinstance(defaults, Mapping):
      raise ValueError(f"{path}: defaults must be a mapping")
    sites: list[SiteConfig] = []

    for site_data in data.get("sites") or []:
      if not isinstance(site_data, Mapping):
        raise ValueError(
          f"{path}: site must be a mapping, got {type(site_data).__name__}"
        )

      # Merge defaults with site-specific config
      merged = {**defaults, **site_data}

      removal_policy_str = str(merged.get("removal_policy", "retain"))
      removal_policy = _REMOVAL_POLICIES.get(
        removal_policy_str.lower(), RemovalPolicy.RETAIN
      )

      sites.append(
        SiteConfig(
          name=merged["name"],
          deployment_name=merged.get("deployment_name"),
          aliases=_string_list("aliases", merged.get("aliases")),
          acm_certificate_arn=merged.get("acm_certificate_arn"),
          origins=list(merged.get("origins") or []),
          cache_behaviors=list(merged.get("cache_behaviors") or []),
          removal_policy=removal_policy,
          owner=merged.get("owner"),
          email=merged.get("email"),
          region=merged.get("region", "us-east-1"),
        )
      )

    return cls(sites=sites)
