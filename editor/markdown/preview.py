"""Debounced live preview for the editing surface.

The editor submits its text on every change. ``PreviewSession`` waits for a
quiet period, renders in a worker thread and publishes the result, making
sure a slow render of old text can never replace the preview of newer text.
"""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from .renderer import render_markdown

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200


def count_words(text: str | None) -> int:
    """Whitespace-separated words in ``text``."""
    text = (text or "").strip()
    return len(text.split()) if text else 0


def reading_time(text: str | None) -> int:
    """Estimated reading time in whole minutes (rounded up)."""
    return math.ceil(count_words(text) / WORDS_PER_MINUTE)


@dataclass(frozen=True)
class PreviewResult:
    sequence: int
    html: str
    word_count: int
    reading_time: int


class PreviewSession:
    """Debounced, latest-wins rendering for one editor.

    Attributes:
        debounce_seconds: Quiet period before rendering (class attr, override in tests).
        latest: The most recently published result, or None.
    """

    debounce_seconds: float = 0.15

    def __init__(
        self,
        *,
        debounce_seconds: float | None = None,
        on_result: Callable[[PreviewResult], None] | None = None,
    ) -> None:
        if debounce_seconds is not None:
            self.debounce_seconds = debounce_seconds
        self._on_result = on_result
        self._sequence = 0
        self._published_sequence = 0
        self._pending: asyncio.Task[None] | None = None
        self.latest: PreviewResult | None = None

    @property
    def html(self) -> str:
        return self.latest.html if self.latest else ""

    def submit(self, text: str) -> int:
        """Schedule a render of ``text``, superseding any pending one.

        Must be called from a running event loop.

        Returns:
            The sequence number assigned to this submission.
        """
        self._sequence += 1
        sequence = self._sequence
        self._cancel_pending()

        async def debounced_render() -> None:
            await asyncio.sleep(self.debounce_seconds)
            await self._render(sequence, text)

        self._pending = asyncio.create_task(debounced_render())
        return sequence

    async def flush(self) -> PreviewResult | None:
        """Wait for the pending render, if any, and return the latest result.

        Cancelling the wait (e.g. a timeout) leaves the render running.
        """
        task = self._pending
        if task is not None:
            try:
                await asyncio.shield(task)
            except asyncio.CancelledError:
                # Superseded by a later submit; that one is pending now
                if task.cancelled() and self._pending is not task:
                    return await self.flush()
                raise
        return self.latest

    def close(self) -> None:
        """Cancel any pending render."""
        self._cancel_pending()

    def _cancel_pending(self) -> None:
        task = self._pending
        self._pending = None
        if task and not task.done():
            task.cancel()

    async def _render(self, sequence: int, text: str) -> None:
        # Last shown HTML stays up if sanitizing this version fails
        context = {"fallback_html": self.html}
        html = await asyncio.to_thread(render_markdown, text, context)
        self.publish(
            PreviewResult(
                sequence=sequence,
                html=html,
                word_count=count_words(text),
                reading_time=reading_time(text),
            )
        )

    def publish(self, result: PreviewResult) -> bool:
        """Show ``result`` unless something newer has already been shown.

        Returns:
            True if the result was published.
        """
        if result.sequence <= self._published_sequence:
            logger.debug(
                f"Discarding stale preview {result.sequence} "
                f"(showing {self._published_sequence})"
            )
            return False

        self._published_sequence = result.sequence
        self.latest = result
        if self._on_result is not None:
            self._on_result(result)
        return True
