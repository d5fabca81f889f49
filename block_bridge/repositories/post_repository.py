"""SQLAlchemy-backed content source for posts."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from block_bridge.db.schema import DbPost
from block_bridge.errors import ContentFetchError
from block_bridge.models import Post


class PostRepository:
    """Repository that persists posts and hydrates them as block trees."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get_post(self, post_id: int) -> Post | None:
        """Return the post or ``None`` when no row exists."""
        try:
            with self._session_factory() as session:
                row = session.get(DbPost, int(post_id))
                if row is None:
                    return None
                return Post.from_wire(row.id, row.title, list(row.blocks or []))
        except SQLAlchemyError as exc:
            raise ContentFetchError(
                "Unable to load post from the database", data={"post_id": post_id}
            ) from exc

    def upsert_posts(self, posts: Sequence[Post]) -> None:
        """Insert or replace posts, storing blocks in wire format."""
        if not posts:
            return
        with self._session_factory.begin() as session:
            for post in posts:
                session.merge(
                    DbPost(
                        id=post.id,
                        title=post.title,
                        blocks=[block.to_wire() for block in post.blocks],
                    )
                )

    def delete_post(self, post_id: int) -> bool:
        with self._session_factory.begin() as session:
            row = session.get(DbPost, int(post_id))
            if row is None:
                return False
            session.delete(row)
            return True


__all__ = ["PostRepository"]
