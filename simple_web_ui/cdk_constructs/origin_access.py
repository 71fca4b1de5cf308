"""CloudFront origin access identity for the website bucket."""

from aws_cdk import aws_cloudfront as cloudfront
from constructs import Construct


class WebsiteOriginAccessIdentity(Construct):
  """Principal CloudFront uses to read from the private bucket."""

  def __init__(self, scope: Construct, id: str, *, comment: str) -> None:
    super().__init__(scope, id)

    self.identity = cloudfront.CfnCloudFrontOriginAccessIdentity(
      self,
      "Identity",
      cloud_front_origin_access_identity_config=(
        cloudfront.CfnCloudFrontOriginAccessIdentity.CloudFrontOriginAccessIdentityConfigProperty(
          comment=comment,
        )
      ),
    )

  @property
  def canonical_user_id(self) -> str:
    return self.identity.attr_s3_canonical_user_id

  @property
  def s3_origin_access_identity(self) -> str:
    """Identity path expected by ``S3OriginConfig.OriginAccessIdentity``."""
    return f"origin-access-identity/cloudfront/{self.identity.ref}"
