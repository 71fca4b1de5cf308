#!/usr/bin/env python3
"""CDK application entry point for web UI deployments."""

import os
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk

from simple_web_ui.config import Config
from simple_web_ui.stacks import SimpleWebUIStack


def stack_name_for(site_name: str) -> str:
  """CloudFormation stack name for a configured deployment."""
  return f"SimpleWebUI-{site_name.replace('.', '-').replace('_', '-')}"


def build_app(app: cdk.App, config: Config) -> list[SimpleWebUIStack]:
  """Add a stack for each configured deployment to the app."""
  # Account comes from the CLI's resolved credentials
  account = os.environ.get("CDK_DEFAULT_ACCOUNT")

  stacks = []
  for site in config.sites:
    stacks.append(
      SimpleWebUIStack(
        app,
        stack_name_for(site.name),
        site_config=site,
        env=cdk.Environment(account=account, region=site.region),
        description=f"Single-page application hosting for {site.name}",
      )
    )
  return stacks


def main() -> None:
  """Create CDK app with stacks for each configured deployment."""
  app = cdk.App()

  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  build_app(app, config)

  app.synth()


if __name__ == "__main__":
  main()
