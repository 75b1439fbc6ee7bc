"""Tests for the in-process view registry."""

import asyncio

from cuecards.clipboard import CopyStatus, MemoryClipboard
from cuecards.dependencies import ViewRegistry


class TestViewRegistry:

    def test_oldest_view_evicted_past_limit(self, sample_answers):
        registry = ViewRegistry(max_views=2)
        first = registry.open("c1", sample_answers, score="6")
        second = registry.open("c2", sample_answers, score="6")
        third = registry.open("c3", sample_answers, score="6")

        assert len(registry) == 2
        assert registry.get(first.view_id) is None
        assert registry.get(second.view_id) is second
        assert registry.get(third.view_id) is third

    def test_recently_used_view_survives(self, sample_answers):
        registry = ViewRegistry(max_views=2)
        first = registry.open("c1", sample_answers, score="6")
        second = registry.open("c2", sample_answers, score="6")
        registry.get(first.view_id)
        registry.open("c3", sample_answers, score="6")

        assert registry.get(first.view_id) is first
        assert registry.get(second.view_id) is None

    def test_evicted_view_is_reset(self, sample_answers):
        async def scenario():
            registry = ViewRegistry(max_views=1)
            first = registry.open("c1", sample_answers, score="6")
            assert await first.controller.copy_item(0) is True
            registry.open("c2", sample_answers, score="6")
            assert first.controller.status(0) is CopyStatus.IDLE
            assert first.controller.copies._timers == {}

        asyncio.run(scenario())

    def test_limit_never_below_one(self, sample_answers):
        registry = ViewRegistry(max_views=0)
        view = registry.open("c1", sample_answers, score="6")
        assert registry.get(view.view_id) is view


class TestMemoryClipboardHistory:

    def test_history_capped_and_writes_counted(self):
        async def scenario():
            clipboard = MemoryClipboard(max_history=2)
            for text in ("a", "b", "c"):
                await clipboard.write_text(text)
            return clipboard

        clipboard = asyncio.run(scenario())
        assert list(clipboard.history) == ["b", "c"]
        assert clipboard.writes == 3
        assert clipboard.text == "c"
