"""CDK stack for a single web UI deployment."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from simple_web_ui.cdk_constructs import SimpleWebUI
from simple_web_ui.config import SiteConfig


class SimpleWebUIStack(cdk.Stack):
  """Stack for a single web UI deployment."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.web_ui = SimpleWebUI(
      self,
      "WebUI",
      deployment_name=site_config.deployment_name,
      aliases=site_config.aliases,
      origins=site_config.origin_properties(),
      cache_behaviors=site_config.cache_behavior_properties(),
      acm_certificate_arn=site_config.acm_certificate_arn,
      removal_policy=site_config.removal_policy,
    )

    # Tag resources with deployment info
    cdk.Tags.of(self).add("Project", "simple-web-ui")
    cdk.Tags.of(self).add("Deployment", site_config.name)
    if site_config.owner:
      cdk.Tags.of(self).add("Owner", site_config.owner)
    if site_config.email:
      cdk.Tags.of(self).add("OwnerEmail", site_config.email)
