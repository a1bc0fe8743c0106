"""Tests for async helpers."""

import asyncio

import pytest

from preflyt.utils.async_utils import safe_async_run


async def _answer() -> int:
    await asyncio.sleep(0)
    return 42


async def _boom() -> None:
    raise ValueError("bad")


def test_safe_async_run_returns_value():
    assert safe_async_run(_answer()) == 42


def test_safe_async_run_propagates_errors():
    with pytest.raises(ValueError, match="bad"):
        safe_async_run(_boom())


@pytest.mark.asyncio
async def test_safe_async_run_inside_running_loop():
    assert safe_async_run(_answer()) == 42
