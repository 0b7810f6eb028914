"""
Pydantic models for the combined data service.

Upstream records are validated in strict mode so that a mistyped field
(e.g. an id sent as a string) is rejected instead of silently coerced.
Ids accept any integral JSON number, so 1.0 is the same id as 1.
Field names on the wire are camelCase; attributes are snake_case.
"""

from typing import Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from typing_extensions import Annotated


def _integral_number(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("id must be a number, not a boolean")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


RecordId = Annotated[int, BeforeValidator(_integral_number)]


class Comment(BaseModel):
    """A comment as served by the comments endpoint."""

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    post_id: RecordId = Field(alias="postId")
    id: RecordId  # noqa: A003
    name: str
    body: str


class Post(BaseModel):
    """A post as served by the posts endpoint."""

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    user_id: RecordId = Field(alias="userId")
    id: RecordId  # noqa: A003
    title: str
    body: str


class User(BaseModel):
    """A user as served by the users endpoint. Only id and username are kept."""

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    id: RecordId  # noqa: A003
    username: str


class CombinedRecord(BaseModel):
    """
    One comment joined with its post and the post's author.

    Serialize with ``model_dump(by_alias=True)`` to get the wire format.
    """

    model_config = ConfigDict(populate_by_name=True)

    post_id: int = Field(alias="postId")
    post_name: str = Field(alias="postName")
    comments_count: int = Field(alias="commentsCount")
    user_name: str = Field(alias="userName")
    body: str
