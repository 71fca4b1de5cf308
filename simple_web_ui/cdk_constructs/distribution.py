"""CloudFront distribution serving a single-page application from S3."""

from collections.abc import Sequence

from aws_cdk import Annotations
from aws_cdk import aws_cloudfront as cloudfront
from constructs import Construct

DEFAULT_ORIGIN_ID = "default"
DEFAULT_ROOT_OBJECT = "index.html"
PRICE_CLASS = "PriceClass_100"

# Seconds
MIN_TTL = 0
DEFAULT_TTL = 5
MAX_TTL = 5


class WebsiteDistribution(Construct):
  """CloudFront distribution with the website bucket as its default origin.

  Caller-supplied origins are appended after the bucket origin and caller
  cache behaviors are passed through unchanged. Missing pages (404) are
  answered with the site root and a 200 so client-side routing can take over.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_domain_name: str,
    origin_access_identity: str,
    comment: str,
    aliases: Sequence[str] | None = None,
    origins: Sequence[cloudfront.CfnDistribution.OriginProperty] | None = None,
    cache_behaviors: Sequence[cloudfront.CfnDistribution.CacheBehaviorProperty]
    | None = None,
    acm_certificate_arn: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    # A bare hostname is still a Sequence[str]
    if isinstance(aliases, str):
      aliases = [aliases]

    if aliases and not acm_certificate_arn:
      Annotations.of(self).add_warning(
        "Aliases require an ACM certificate; CloudFront will reject "
        f"{', '.join(aliases)} without acm_certificate_arn"
      )

    self.distribution = cloudfront.CfnDistribution(
      self,
      "Distribution",
      distribution_config=cloudfront.CfnDistribution.DistributionConfigProperty(
        aliases=list(aliases) if aliases is not None else None,
        price_class=PRICE_CLASS,
        enabled=True,
        comment=comment,
        default_cache_behavior=self._default_cache_behavior(),
        cache_behaviors=list(cache_behaviors) if cache_behaviors is not None else None,
        default_root_object=DEFAULT_ROOT_OBJECT,
        custom_error_responses=[
          cloudfront.CfnDistribution.CustomErrorResponseProperty(
            error_code=404,
            response_code=200,
            response_page_path="/",
          )
        ],
        origins=self._origins(bucket_domain_name, origin_access_identity, origins),
        viewer_certificate=self._viewer_certificate(acm_certificate_arn),
      ),
    )

  @staticmethod
  def _origins(
    bucket_domain_name: str,
    origin_access_identity: str,
    extra: Sequence[cloudfront.CfnDistribution.OriginProperty] | None,
  ) -> list[cloudfront.CfnDistribution.OriginProperty]:
    # The bucket origin always comes first
    origins = [
      cloudfront.CfnDistribution.OriginProperty(
        id=DEFAULT_ORIGIN_ID,
        domain_name=bucket_domain_name,
        s3_origin_config=cloudfront.CfnDistribution.S3OriginConfigProperty(
          origin_access_identity=origin_access_identity,
        ),
      )
    ]
    origins.extend(extra or [])
    return origins

  @staticmethod
  def _default_cache_behavior() -> cloudfront.CfnDistribution.DefaultCacheBehaviorProperty:
    return cloudfront.CfnDistribution.DefaultCacheBehaviorProperty(
      min_ttl=MIN_TTL,
      default_ttl=DEFAULT_TTL,
      max_ttl=MAX_TTL,
      target_origin_id=DEFAULT_ORIGIN_ID,
      viewer_protocol_policy="redirect-to-https",
      forwarded_values=cloudfront.CfnDistribution.ForwardedValuesProperty(
        query_string=True,
      ),
    )

  @staticmethod
  def _viewer_certificate(
    acm_certificate_arn: str | None,
  ) -> cloudfront.CfnDistribution.ViewerCertificateProperty:
    if acm_certificate_arn:
      return cloudfront.CfnDistribution.ViewerCertificateProperty(
        acm_certificate_arn=acm_certificate_arn,
        ssl_support_method="sni-only",
      )
    return cloudfront.CfnDistribution.ViewerCertificateProperty(
      cloud_front_default_certificate=True,
    )
