"""
Navigation context supplied by the platform adapter
"""

from typing import Dict, Optional
from urllib.parse import parse_qs, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from lead_intel.shared.constants.attribution import DEFAULT_VIEWPORT_WIDTH


class NavigationContext(BaseModel):
    """Where the user currently is and what client they are using"""

    model_config = ConfigDict(frozen=True)

    url: str = Field(default="/", description="Current location, absolute or path")
    referrer: Optional[str] = Field(None, description="Document referrer")
    title: Optional[str] = Field(None, description="Document title")
    viewport_width: int = Field(default=DEFAULT_VIEWPORT_WIDTH, ge=0)
    user_agent: str = Field(default="", description="Client user agent string")

    @property
    def path(self) -> str:
        return urlsplit(self.url).path or "/"

    @property
    def query(self) -> Dict[str, str]:
        """First value of every query parameter, blank values kept"""
        parsed = parse_qs(urlsplit(self.url).query, keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items() if values}

    def query_param(self, name: str) -> Optional[str]:
        return self.query.get(name)
