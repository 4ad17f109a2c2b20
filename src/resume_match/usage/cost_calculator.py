"""Estimated cost of Claude API usage for provider-backed analyses."""

from __future__ import annotations

# Pricing per 1M tokens (USD)
MODEL_PRICING: dict[str, dict[str, float]] = {
    "claude-haiku-4-5-20251001": {"input": 1.00, "output": 5.00},
    "claude-sonnet-4-5-20250929": {"input": 3.00, "output": 15.00},
}


def calculate_cost(calls: list[tuple[str, int, int]]) -> float:
    """Total estimated USD cost for (model_id, input_tokens, output_tokens) calls.

    Calls to models without a known price contribute nothing.
    """
    total = 0.0
    for model_id, input_tokens, output_tokens in calls:
        pricing = MODEL_PRICING.get(model_id)
        if pricing is None:
            continue
        total += (input_tokens / 1_000_000) * pricing["input"]
        total += (output_tokens / 1_000_000) * pricing["output"]
    return total


def usage_metadata(calls: list[tuple[str, int, int]]) -> dict:
    """Token totals and estimated cost for the provider calls of one analysis."""
    return {
        "input_tokens": sum(call[1] for call in calls),
        "output_tokens": sum(call[2] for call in calls),
        "calls": len(calls),
        "estimated_cost_usd": calculate_cost(calls),
    }
