"""Retry policy factory: selects implementation from config."""
from __future__ import annotations

from sfsclient.app.config.settings import Settings
from sfsclient.app.constants import RETRY_POLICY
from sfsclient.app.infrastructure.retry.backoff_retry_policy import BackoffRetryPolicy
from sfsclient.app.ports.retry_policy import NoRetryPolicy, RetryPolicy


def create_retry_policy(settings: Settings) -> RetryPolicy:
    policy = settings.retry_policy.strip().lower()

    if policy == RETRY_POLICY.NONE:
        return NoRetryPolicy()
    if policy == RETRY_POLICY.BACKOFF:
        return BackoffRetryPolicy(
            settings.initial_backoff_seconds,
            settings.max_backoff_seconds,
            settings.backoff_multiplier,
            settings.retry_max_attempts,
        )

    raise ValueError(f"Unsupported retry policy: {policy}")
