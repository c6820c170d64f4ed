"""Feature flags for the pending-state rollout.

The flags are constants like the rest of the wallet configuration: one
frozen instance, no runtime setters. Bucketing is deterministic per user id
so a user sees the same behaviour on every launch and every device.
"""

from __future__ import annotations

import hashlib
import logging

from pydantic import Field

from core.domain.models import NamespaceModel

logger = logging.getLogger(__name__)


class FeatureFlags(NamespaceModel):
    use_computed_pending_state: bool = Field(
        default=True,
        alias="useComputedPendingState",
        description="Read poller-computed pending state instead of client-side discovery.",
    )
    use_computed_state_cache: bool = Field(
        default=True,
        alias="useComputedStateCache",
        description="Cache computed state locally for offline access.",
    )
    use_background_state_refresh: bool = Field(
        default=True,
        alias="useBackgroundStateRefresh",
        description="Refresh stale computed state in the background.",
    )
    computed_state_staleness_minutes: int = Field(
        default=15,
        ge=1,
        alias="computedStateStalenessMinutes",
        description="Age after which computed state counts as stale.",
    )
    use_computed_signing_paths: bool = Field(
        default=True,
        alias="useComputedSigningPaths",
        description="Take signing paths from computed state.",
    )
    allow_legacy_discovery_fallback: bool = Field(
        default=True,
        alias="allowLegacyDiscoveryFallback",
        description="Fall back to client-side discovery when computed state is missing.",
    )
    debug_computed_state: bool = Field(
        default=False,
        alias="debugComputedState",
        description="Log bucketing decisions at DEBUG.",
    )
    always_refresh_on_launch: bool = Field(
        default=False,
        alias="alwaysRefreshOnLaunch",
        description="Ignore cached state on launch (testing only).",
    )
    simulate_slow_loading: bool = Field(
        default=False,
        alias="simulateSlowLoading",
        description="Add an artificial delay to state loading (testing only).",
    )
    simulated_loading_delay_ms: int = Field(
        default=3000,
        ge=0,
        alias="simulatedLoadingDelayMs",
        description="Delay used when simulate_slow_loading is on.",
    )
    computed_state_rollout_percentage: int = Field(
        default=100,
        ge=0,
        le=100,
        alias="computedStateRolloutPercentage",
        description="Share of users (0-100) that get computed state.",
    )

    def user_percentile(self, uid: str) -> int:
        """Stable bucket in ``[0, 100)`` for a user id."""

        digest = hashlib.sha256(uid.encode("utf-8")).digest()
        return int.from_bytes(digest[:8], "big") % 100

    def is_computed_state_enabled_for_user(self, uid: str) -> bool:
        if not self.use_computed_pending_state:
            return False
        if self.computed_state_rollout_percentage >= 100:
            return True
        if self.computed_state_rollout_percentage <= 0:
            return False

        percentile = self.user_percentile(uid)
        enabled = percentile < self.computed_state_rollout_percentage
        if self.debug_computed_state:
            logger.debug(
                "User %s: percentile=%d enabled=%s (rollout %d%%)",
                uid,
                percentile,
                enabled,
                self.computed_state_rollout_percentage,
            )
        return enabled

    def validate_configuration(self) -> list[str]:
        """Warnings for flag combinations that are legal but risky."""

        warnings: list[str] = []
        if self.use_computed_pending_state and not self.allow_legacy_discovery_fallback:
            warnings.append(
                "Computed state enabled without legacy fallback - may cause issues for new users"
            )
        if self.computed_state_staleness_minutes < 5:
            warnings.append(
                f"Very low staleness threshold ({self.computed_state_staleness_minutes}min) "
                "may cause excessive refreshes"
            )
        if self.simulate_slow_loading and self.simulated_loading_delay_ms > 10_000:
            warnings.append(
                f"Very high simulated loading delay ({self.simulated_loading_delay_ms}ms) "
                "may impact testing"
            )
        if self.always_refresh_on_launch and not self.debug_computed_state:
            warnings.append(
                "Always refresh on launch enabled outside debug - may impact performance"
            )
        return warnings


FEATURE_FLAGS = FeatureFlags()
