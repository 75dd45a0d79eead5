import asyncio

import pytest


def _active_handles(loop: asyncio.AbstractEventLoop) -> int:
    scheduled = getattr(loop, "_scheduled", None)
    if scheduled is None:
        return -1
    return sum(1 for h in scheduled if not h.cancelled())


@pytest.fixture(autouse=True)
async def _check_loop_clean() -> None:
    loop = asyncio.get_running_loop()
    handles_before = _active_handles(loop)
    tasks_before = len(asyncio.all_tasks())

    yield  # type: ignore[misc]

    if handles_before >= 0:
        assert _active_handles(loop) == handles_before, (
            f"timer handles leaked: {handles_before} -> {_active_handles(loop)}"
        )
    assert len(asyncio.all_tasks()) == tasks_before, (
        f"tasks leaked: {tasks_before} -> {len(asyncio.all_tasks())}"
    )
