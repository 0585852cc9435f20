"""Configuration for report generation."""

from pydantic import BaseModel


class ReportConfig(BaseModel):
    """Configuration for decoding posted results and writing the report."""

    # None means the host's preferred encoding
    encoding: str | None = None
    output_encoding: str = "utf-8"
