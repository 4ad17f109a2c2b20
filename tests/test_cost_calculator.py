"""Tests for cost estimation of provider calls."""

from __future__ import annotations

import pytest

from resume_match.usage.cost_calculator import MODEL_PRICING, calculate_cost, usage_metadata


class TestCostCalculator:
    def test_haiku_cost(self):
        cost = calculate_cost([("claude-haiku-4-5-20251001", 1_000_000, 1_000_000)])
        pricing = MODEL_PRICING["claude-haiku-4-5-20251001"]
        assert cost == pytest.approx(pricing["input"] + pricing["output"])

    def test_sonnet_cost(self):
        cost = calculate_cost([("claude-sonnet-4-5-20250929", 1_000_000, 1_000_000)])
        assert cost == pytest.approx(18.00)

    def test_multiple_calls(self):
        calls = [
            ("claude-haiku-4-5-20251001", 1000, 500),
            ("claude-sonnet-4-5-20250929", 2000, 1000),
        ]
        haiku = MODEL_PRICING["claude-haiku-4-5-20251001"]
        expected = (
            (1000 / 1e6) * haiku["input"] + (500 / 1e6) * haiku["output"]
            + (2000 / 1e6) * 3.00 + (1000 / 1e6) * 15.00
        )
        assert calculate_cost(calls) == pytest.approx(expected)

    def test_unknown_model_ignored(self):
        assert calculate_cost([("unknown-model", 1000, 1000)]) == 0.0

    def test_empty(self):
        assert calculate_cost([]) == 0.0


class TestUsageMetadata:
    def test_single_call(self):
        meta = usage_metadata([("claude-sonnet-4-5-20250929", 3000, 1000)])
        assert meta["input_tokens"] == 3000
        assert meta["output_tokens"] == 1000
        assert meta["calls"] == 1
        assert meta["estimated_cost_usd"] == pytest.approx(0.009 + 0.015)

    def test_sums_multiple_calls(self):
        meta = usage_metadata([
            ("claude-haiku-4-5-20251001", 100, 50),
            ("claude-haiku-4-5-20251001", 200, 25),
        ])
        assert meta["input_tokens"] == 300
        assert meta["output_tokens"] == 75
        assert meta["calls"] == 2

    def test_no_calls(self):
        assert usage_metadata([]) == {
            "input_tokens": 0,
            "output_tokens": 0,
            "calls": 0,
            "estimated_cost_usd": 0.0,
        }
