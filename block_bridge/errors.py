"""Error types surfaced by the block bridge."""

from __future__ import annotations

from typing import Any


class BlockBridgeError(RuntimeError):
    """Base class for reportable bridge failures."""

    code = "block_bridge_error"
    status = 500

    def __init__(self, message: str, *, data: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.data = dict(data or {})

    def to_dict(self) -> dict[str, Any]:
        """Return the error envelope used by the content API."""
        return {
            "code": self.code,
            "message": self.message,
            "data": {"status": self.status, **self.data},
        }


class ContentFetchError(BlockBridgeError):
    """Raised when the content source cannot deliver a block tree."""

    code = "fetch_error"
    status = 502


class PostNotFoundError(ContentFetchError):
    """Raised when a content identifier does not resolve to a post."""

    code = "post_not_found"
    status = 404

    def __init__(self, post_id: int | str):
        super().__init__("Post not found", data={"post_id": post_id})
        self.post_id = post_id


class ContentValidationError(BlockBridgeError):
    """Raised when a block tree is structurally unacceptable (e.g. too deep)."""

    code = "invalid_content"
    status = 422


__all__ = [
    "BlockBridgeError",
    "ContentFetchError",
    "ContentValidationError",
    "PostNotFoundError",
]
