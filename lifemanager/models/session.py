"""Session identity model."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserSession(BaseModel):
    """
    The currently signed-in user.

    At most one exists per process; it is held by SessionProvider and
    mirrored into blob storage so it survives a restart.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    uid: str = Field(
        ...,
        min_length=1,
        description="Stable user identifier, used as Record.user_id"
    )
    email: str
    display_name: str
    email_verified: bool = True

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
