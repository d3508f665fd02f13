"""Ad request URL construction."""

from adgen.urls.builder import build_request_url, build_urls, query_pairs
from adgen.urls.models import AdPlacement, BuildContext, EndpointSettings


__all__ = [
    "AdPlacement",
    "BuildContext",
    "EndpointSettings",
    "build_request_url",
    "build_urls",
    "query_pairs",
]
