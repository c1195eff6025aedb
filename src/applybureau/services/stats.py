"""Application statistics derived from a client's tracked applications.

Everything here is a pure function of its inputs; the report is recomputed
on every request and never stored.
"""

import math
import uuid
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Iterable, Protocol

from applybureau.schemas.application import (
    ApplicationStatsReport,
    OverallStatsReport,
    StatusBreakdown,
)

DEFAULT_TIER = "Tier 1"
TIER_WEEKLY_TARGETS = {
    "Tier 1": 17,
    "Tier 2": 30,
    "Tier 3": 50,
}
DEFAULT_WEEKLY_TARGET = TIER_WEEKLY_TARGETS[DEFAULT_TIER]

# Consultation package interest -> service tier
PACKAGE_TIERS = {
    "essential": "Tier 1",
    "professional": "Tier 2",
    "executive": "Tier 3",
}

BUCKETS = ("applied", "interviewing", "offer", "rejected", "withdrawn")


class TrackedApplication(Protocol):
    status: str | None
    application_date: datetime | None
    created_at: datetime | None


class ClientApplication(TrackedApplication, Protocol):
    client_id: uuid.UUID


def resolve_tier(package_interest: str | None) -> str:
    """Map a consultation package interest (or literal tier) to a tier label."""
    if not package_interest:
        return DEFAULT_TIER
    if package_interest in TIER_WEEKLY_TARGETS:
        return package_interest
    return PACKAGE_TIERS.get(package_interest.lower(), DEFAULT_TIER)


def weekly_target_for(tier: str) -> int:
    return TIER_WEEKLY_TARGETS.get(tier, DEFAULT_WEEKLY_TARGET)


def status_bucket(status: str | None) -> str:
    """Collapse a raw status into one of the five reporting buckets."""
    status = (status or "applied").lower()
    if "interview" in status or status == "second_round":
        return "interviewing"
    if "offer" in status or status in ("hired", "accepted"):
        return "offer"
    if status in ("rejected", "withdrawn"):
        return status
    return "applied"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def as_aware(value: datetime) -> datetime:
    """Naive timestamps come back from SQLite; they are stored as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def week_start(moment: datetime) -> datetime:
    """Sunday 00:00 of the week containing ``moment``, in its own timezone."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    days_since_sunday = (moment.weekday() + 1) % 7
    start = moment - timedelta(days=days_since_sunday)
    return start.replace(hour=0, minute=0, second=0, microsecond=0)


def applied_at(application: TrackedApplication) -> datetime | None:
    moment = application.application_date or application.created_at
    return as_aware(moment) if moment else None


def bucket_counts(applications: Iterable[TrackedApplication]) -> StatusBreakdown:
    counts = Counter(status_bucket(application.status) for application in applications)
    return StatusBreakdown(**{bucket: counts.get(bucket, 0) for bucket in BUCKETS})


def rate(count: int, total: int) -> int:
    return round_half_up(count / total * 100) if total else 0


def default_stats(tier: str = DEFAULT_TIER) -> ApplicationStatsReport:
    return ApplicationStatsReport(tier=tier, weekly_target=weekly_target_for(tier))


def compute_stats(
    applications: Iterable[TrackedApplication],
    tier: str = DEFAULT_TIER,
    now: datetime | None = None,
    progress_cap: int | None = 100,
) -> ApplicationStatsReport:
    """Build the stats report for one client's applications."""
    applications = list(applications)
    weekly_target = weekly_target_for(tier)
    start = week_start(now or datetime.now().astimezone())

    this_week = 0
    for application in applications:
        moment = applied_at(application)
        if moment is not None and moment >= start:
            this_week += 1

    breakdown = bucket_counts(applications)

    total = len(applications)
    weekly_progress = round_half_up(this_week / weekly_target * 100)
    if progress_cap is not None:
        weekly_progress = max(0, min(weekly_progress, progress_cap))

    return ApplicationStatsReport(
        tier=tier,
        weekly_target=weekly_target,
        total_applications=total,
        applications_this_week=this_week,
        weekly_progress=weekly_progress,
        status_breakdown=breakdown,
        response_rate=rate(breakdown.interviewing + breakdown.offer, total),
        offer_rate=rate(breakdown.offer, total),
    )


def compute_overall_stats(applications: Iterable[ClientApplication]) -> OverallStatsReport:
    """Build the staff overview across all clients."""
    applications = list(applications)
    breakdown = bucket_counts(applications)
    total = len(applications)

    return OverallStatsReport(
        total_applications=total,
        total_clients=len({application.client_id for application in applications}),
        status_breakdown=breakdown,
        overall_response_rate=rate(breakdown.interviewing + breakdown.offer, total),
        overall_offer_rate=rate(breakdown.offer, total),
    )
