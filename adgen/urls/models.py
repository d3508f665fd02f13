"""Models for request URL construction."""

from pydantic import ConfigDict, Field

from adgen.models.base import AdgenBaseModel


DEFAULT_BASE_URL = "https://ads.eskimi.com/getad/"
DEFAULT_TAG = "97cc83bb9917a07bdf3d53e8507157b2"
DEFAULT_DOMAIN = "demo.eskimi.com"
DEFAULT_PAGE = "https://demo.eskimi.com/publisher/"
DEFAULT_AUDIT = "1"


class EndpointSettings(AdgenBaseModel):
    """The demo endpoint and the fixed values every request carries."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, description="getad endpoint URL")
    tag: str = Field(default=DEFAULT_TAG, description="Routing tag of the demo placement")
    domain: str = Field(default=DEFAULT_DOMAIN, description="Publisher domain")
    audit: str = Field(default=DEFAULT_AUDIT, description="Audit flag value")


class BuildContext(AdgenBaseModel):
    """Caller-supplied inputs to a build that are not part of the configuration."""

    model_config = ConfigDict(frozen=True)

    page: str = Field(default=DEFAULT_PAGE, description="Current page reference")
    endpoint: EndpointSettings = Field(default_factory=EndpointSettings)


class AdPlacement(AdgenBaseModel):
    """One generated ad slot."""

    model_config = ConfigDict(frozen=True)

    url: str
    width: int
    height: int
