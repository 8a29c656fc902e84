from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeAlias

PostProcessor: TypeAlias = Any
"""An opaque lifecycle hook handle. The factory stores it and never calls it."""


class PostProcessorRegistry:
    """Keep post-processors in registration order.

    The list is append-only. Registered hooks are not invoked anywhere yet;
    this is the registration surface for a future initialization pipeline.
    """

    def __init__(self) -> None:
        self._post_processors: list[PostProcessor] = []

    def register(self, post_processor: PostProcessor) -> None:
        """Append a post-processor. Duplicates are kept as separate entries."""
        self._post_processors.append(post_processor)

    def values(self) -> tuple[PostProcessor, ...]:
        """Get a snapshot of registered post-processors in registration order."""
        return tuple(self._post_processors)

    def __iter__(self) -> Iterator[PostProcessor]:
        return iter(self.values())

    def __len__(self) -> int:
        return len(self._post_processors)
