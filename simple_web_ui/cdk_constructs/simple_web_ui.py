"""Composite construct for S3 + CloudFront single-page application hosting."""

from collections.abc import Sequence

from aws_cdk import CfnOutput, RemovalPolicy
from aws_cdk import aws_cloudfront as cloudfront
from constructs import Construct

from .distribution import WebsiteDistribution
from .origin_access import WebsiteOriginAccessIdentity
from .storage import WebsiteBucket

DEFAULT_COMMENT = "Cloudmod deployment, simple-web-ui module."


class SimpleWebUI(Construct):
  """Static website hosting.

  Creates:
  - Private S3 bucket for the site content
  - CloudFront origin access identity
  - Bucket policy letting only that identity read the bucket
  - CloudFront distribution with the bucket as its default origin

  The bucket name is exported as the ``SimpleWebUIBucket`` output of the
  enclosing scope.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    deployment_name: str | None = None,
    aliases: Sequence[str] | None = None,
    origins: Sequence[cloudfront.CfnDistribution.OriginProperty] | None = None,
    cache_behaviors: Sequence[cloudfront.CfnDistribution.CacheBehaviorProperty]
    | None = None,
    acm_certificate_arn: str | None = None,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    comment = deployment_name or DEFAULT_COMMENT

    # Origin access identity
    oai = WebsiteOriginAccessIdentity(self, "WebsiteOAI", comment=comment)
    self.website_oai = oai.identity

    # Bucket, readable only through the identity
    storage = WebsiteBucket(self, "WebsiteBucket", removal_policy=removal_policy)
    storage.grant_read_to_canonical_user(oai.canonical_user_id)
    self.website_bucket = storage.bucket

    # CloudFront distribution
    distribution = WebsiteDistribution(
      self,
      "WebsiteDistribution",
      bucket_domain_name=self.website_bucket.bucket_domain_name,
      origin_access_identity=oai.s3_origin_access_identity,
      comment=comment,
      aliases=aliases,
      origins=origins,
      cache_behaviors=cache_behaviors,
      acm_certificate_arn=acm_certificate_arn,
    )
    self.website_distribution = distribution.distribution

    # Output on the enclosing scope
    CfnOutput(scope, "SimpleWebUIBucket", value=self.website_bucket.bucket_name)
