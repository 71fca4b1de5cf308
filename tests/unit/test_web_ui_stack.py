"""Tests for the SimpleWebUIStack and the CDK app wiring."""

from pathlib import Path

import pytest
from aws_cdk import App, Environment
from aws_cdk.assertions import Annotations, Match, Template

from simple_web_ui.app import build_app, stack_name_for
from simple_web_ui.config import Config, SiteConfig
from simple_web_ui.stacks import SimpleWebUIStack


class TestSimpleWebUIStack:
  """Test a stack built from a full SiteConfig."""

  @pytest.fixture
  def template(self, app: App, site_config: SiteConfig) -> Template:
    stack = SimpleWebUIStack(
      app,
      "TestStack",
      site_config=site_config,
      env=Environment(region="us-east-1"),
    )
    return Template.from_stack(stack)

  def test_config_reaches_distribution(self, template: Template) -> None:
    """Verify YAML-style origins and behaviors end up in the distribution."""
    template.has_resource_properties(
      "AWS::CloudFront::Distribution",
      {
        "DistributionConfig": {
          "Comment": "Dashboard",
          "Aliases": ["app.example.com"],
          "Origins": [
            Match.object_like({"Id": "default"}),
            {
              "Id": "api",
              "DomainName": "api.example.com",
              "CustomOriginConfig": {"OriginProtocolPolicy": "https-only"},
            },
          ],
          "CacheBehaviors": [
            {
              "PathPattern": "/api/*",
              "TargetOriginId": "api",
              "ViewerProtocolPolicy": "https-only",
              "ForwardedValues": {"QueryString": True},
            }
          ],
        },
      },
    )

  def test_bucket_output(self, template: Template) -> None:
    """Verify the bucket output lands on the stack."""
    template.has_output("SimpleWebUIBucket", Match.any_value())

  def test_tags(self, template: Template) -> None:
    """Verify deployment tags are applied."""
    template.has_resource_properties(
      "AWS::S3::Bucket",
      {
        "Tags": Match.array_with(
          [
            {"Key": "Deployment", "Value": "dashboard"},
            {"Key": "Owner", "Value": "Web Team"},
            {"Key": "OwnerEmail", "Value": "web@example.com"},
            {"Key": "Project", "Value": "simple-web-ui"},
          ]
        ),
      },
    )


class TestStackWithoutOwner:
  """Test a minimal SiteConfig."""

  def test_owner_tags_skipped(self) -> None:
    """Verify owner tags are left out when unset."""
    app = App()
    stack = SimpleWebUIStack(app, "TestStack", site_config=SiteConfig(name="docs"))
    template = Template.from_stack(stack)

    buckets = template.find_resources("AWS::S3::Bucket")
    (bucket,) = buckets.values()
    keys = [tag["Key"] for tag in bucket["Properties"]["Tags"]]
    assert "Owner" not in keys
    assert "OwnerEmail" not in keys
    assert "Project" in keys


class TestStackFromYaml:
  """Test a stack built from a loaded sites.yaml."""

  def test_scalar_alias(self, tmp_path: Path) -> None:
    """Verify a single alias string is synthesized as one alias."""
    config_file = tmp_path / "sites.yaml"
    config_file.write_text("sites:\n  - name: docs\n    aliases: app.example.com\n")
    (site,) = Config.from_yaml(config_file).sites

    app = App()
    stack = SimpleWebUIStack(app, "TestStack", site_config=site)
    template = Template.from_stack(stack)

    template.has_resource_properties(
      "AWS::CloudFront::Distribution",
      {"DistributionConfig": {"Aliases": ["app.example.com"]}},
    )
    Annotations.from_stack(stack).has_warning(
      "*", Match.string_like_regexp("Aliases require an ACM certificate")
    )


class TestBuildApp:
  """Test the app entry point wiring."""

  def test_stack_name_for(self) -> None:
    """Verify stack names are CloudFormation-safe."""
    assert stack_name_for("docs") == "SimpleWebUI-docs"
    assert stack_name_for("app.example.com") == "SimpleWebUI-app-example-com"
    assert stack_name_for("my_site") == "SimpleWebUI-my-site"

  def test_one_stack_per_site(self) -> None:
    """Verify a stack is created for each configured site."""
    app = App()
    config = Config(
      sites=[
        SiteConfig(name="docs"),
        SiteConfig(name="dashboard", region="eu-west-1"),
      ]
    )

    stacks = build_app(app, config)

    assert [s.stack_name for s in stacks] == [
      "SimpleWebUI-docs",
      "SimpleWebUI-dashboard",
    ]
    assert stacks[1].region == "eu-west-1"
