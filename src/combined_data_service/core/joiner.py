"""
Joiner for the combined data service.

Joins comments to their post and to the post's author. The output contains
one record per comment whose post exists, in comment fetch order. Comments
pointing at an unknown post are dropped; posts pointing at an unknown user
produce a record with an empty user name.
"""

from collections import Counter
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Type, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from combined_data_service.errors import SchemaError
from combined_data_service.models import Comment, CombinedRecord, Post, User

ModelT = TypeVar("ModelT", bound=BaseModel)

MISSING_USER_NAME = ""


def _validate_records(
    model: Type[ModelT],
    records: Sequence[Mapping[str, Any]],
    collection: str,
) -> List[ModelT]:
    """
    Validate every record of a collection against its strict schema.

    Raises:
        SchemaError: On the first record that fails validation.
    """
    validated = []
    for index, record in enumerate(records):
        try:
            validated.append(model.model_validate(record))
        except ValidationError as e:
            raise SchemaError(
                f"Invalid {collection} record at index {index}: {e}",
                collection=collection,
                index=index,
            ) from e
    return validated


def _index_by_id(records: Iterable[ModelT]) -> Dict[int, ModelT]:
    # First record seen for an id wins.
    index: Dict[int, ModelT] = {}
    for record in records:
        index.setdefault(record.id, record)
    return index


def join(
    comments: Sequence[Mapping[str, Any]],
    posts: Sequence[Mapping[str, Any]],
    users: Sequence[Mapping[str, Any]],
) -> List[CombinedRecord]:
    """
    Join comments, posts and users into combined records.

    Args:
        comments: Raw comment records in fetch order
        posts: Raw post records in fetch order
        users: Raw user records in fetch order

    Returns:
        List[CombinedRecord]: One record per comment with a matching post

    Raises:
        SchemaError: If any record of any collection is malformed
    """
    comment_models = _validate_records(Comment, comments, "comment")
    post_models = _validate_records(Post, posts, "post")
    user_models = _validate_records(User, users, "user")

    posts_by_id = _index_by_id(post_models)
    users_by_id = _index_by_id(user_models)
    comments_per_post = Counter(comment.post_id for comment in comment_models)

    combined: List[CombinedRecord] = []
    dropped = 0
    missing_users = 0

    for comment in comment_models:
        post = posts_by_id.get(comment.post_id)
        if post is None:
            dropped += 1
            continue

        user = users_by_id.get(post.user_id)
        if user is None:
            missing_users += 1

        combined.append(
            CombinedRecord(
                post_id=post.id,
                post_name=post.title,
                comments_count=comments_per_post[post.id],
                user_name=user.username if user is not None else MISSING_USER_NAME,
                body=comment.body,
            )
        )

    logger.debug(
        f"Joined {len(combined)} records "
        f"({dropped} comments without post, {missing_users} records without user)"
    )
    return combined
