"""CDK constructs for single-page application hosting."""

from .distribution import WebsiteDistribution
from .origin_access import WebsiteOriginAccessIdentity
from .simple_web_ui import SimpleWebUI
from .storage import WebsiteBucket

__all__ = [
  "SimpleWebUI",
  "WebsiteBucket",
  "WebsiteDistribution",
  "WebsiteOriginAccessIdentity",
]
