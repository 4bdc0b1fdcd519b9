from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

from feedback_api.errors import ValidationError


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Feedback(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utc_now, index=True)

    @classmethod
    def create(cls, raw_content) -> "Feedback":
        """Luo uuden palautteen; sisältö trimmataan eikä se saa olla tyhjä."""
        if not isinstance(raw_content, str) or not raw_content.strip():
            raise ValidationError("Feedback content is required")
        return cls(content=raw_content.strip())


class FeedbackCreate(BaseModel):
    """POST-pyynnön runko. Sisältö tarkistetaan palvelukerroksessa."""
    content: str | None = None


class FeedbackRead(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: int
    content: str
    created_at: datetime
