"""Schemas exchanged with the presentation layer."""

from typing import Optional

from pydantic import BaseModel, Field


class BrowserConfig(BaseModel):
    """What the UI needs to know about how the process was started."""

    cli_mode: bool = Field(default=False, description="Bound to a profile at startup")
    bucket: Optional[str] = Field(default=None, description="Bucket to open")
    root_prefix: str = Field(default="", description="Prefix the UI starts at")
    region: Optional[str] = Field(default=None, description="Resolved AWS region")
    session_id: Optional[str] = Field(
        default=None, description="Pre-registered session id in CLI mode"
    )
