from pydantic import BaseModel


class PageMetadata(BaseModel):
    """Descriptive metadata extracted from a remote HTML page."""

    title: str = ""
