"""Deterministic construction of ad request URLs.

Query layout::

    {base_url}?tag=..&w=..&h=..&audit=..&domain=..&page=..[&key=value]*

Overrides follow the fixed parameters in edit order. An override that reuses
a fixed name (``w``, ``tag``, ...) is sent as well; the ad server decides
which value it honours. Keys and values are encoded as
``application/x-www-form-urlencoded`` (space becomes ``+``).
"""

from urllib.parse import urlencode

from adgen.configuration.models import AdConfiguration
from adgen.core.structlog_logger import get_struct_logger
from adgen.urls.models import AdPlacement, BuildContext


logger = get_struct_logger(__name__)


def query_pairs(
    model: AdConfiguration, context: BuildContext
) -> list[tuple[str, str]]:
    """Ordered query parameters for one request, before encoding."""
    endpoint = context.endpoint
    pairs = [
        ("tag", endpoint.tag),
        ("w", str(model.width)),
        ("h", str(model.height)),
        ("audit", endpoint.audit),
        ("domain", endpoint.domain),
        ("page", context.page),
    ]
    pairs.extend((entry.key, entry.value) for entry in model.active_overrides())
    return pairs


def build_request_url(model: AdConfiguration, context: BuildContext) -> str:
    """Encode the request URL shared by every placement of ``model``."""
    base_url = context.endpoint.base_url
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{urlencode(query_pairs(model, context))}"


def build_urls(
    model: AdConfiguration, context: BuildContext | None = None
) -> list[AdPlacement]:
    """Build ``model.placement_count`` identical placements.

    The count models N slots asking for the same placement, so every element
    carries the same URL. ``model`` is only read.

    Args:
        model: A validated configuration
        context: Page reference and endpoint; defaults to the demo endpoint

    Returns:
        List of placements in slot order
    """
    if context is None:
        context = BuildContext()

    url = build_request_url(model, context)
    placement = AdPlacement(url=url, width=model.width, height=model.height)
    placements = [placement] * model.placement_count

    logger.debug(
        "urls_built",
        placements=model.placement_count,
        overrides=len(model.active_overrides()),
        url_length=len(url),
    )
    return placements


__all__ = ["build_request_url", "build_urls", "query_pairs"]
