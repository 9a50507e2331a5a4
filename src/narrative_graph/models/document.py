"""Document model for caller-supplied text."""

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """A named unit of source text, markup included."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(strict=True)
    content: str = Field(strict=True)

    def short_name(self, width: int = 40) -> str:
        """Return the name clipped for display."""
        if len(self.name) <= width:
            return self.name
        return "..." + self.name[-(width - 3):]
