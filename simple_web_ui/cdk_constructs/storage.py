"""Private S3 bucket holding the website content."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct


class WebsiteBucket(Construct):
  """S3 bucket readable only through CloudFront."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )

  def grant_read_to_canonical_user(self, canonical_user_id: str) -> iam.PolicyStatement:
    """Allow a canonical user (an origin access identity) to read the bucket."""
    statement = iam.PolicyStatement(
      principals=[iam.CanonicalUserPrincipal(canonical_user_id)],
      actions=[
        "s3:GetObject",
        "s3:ListBucket",
      ],
      resources=[
        self.bucket.bucket_arn,
        self.bucket.arn_for_objects("*"),
      ],
    )
    self.bucket.add_to_resource_policy(statement)
    return statement
