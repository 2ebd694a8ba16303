"""Activity aggregation and classification use cases."""

from .aggregator import aggregate_activity, sort_activity
from .bucketizer import (
    ACTIVITY_FILTERS,
    BUCKET_TODAY,
    BUCKET_YESTERDAY,
    bucket_activity,
    filter_activity,
    format_bucket_label,
    normalize_activity_filter,
)
from .classifier import classify_activity, humanize_action
from .normalizer import ORDER_UPDATE_THRESHOLD, normalize_records
from .summary import RECENT_ACTIVITY_LIMIT, get_recent_activity
from .timeline import (
    ActivityLog,
    build_activity_log,
    get_user_activity_log,
    get_user_recent_activity,
)

__all__ = [
    "ACTIVITY_FILTERS",
    "BUCKET_TODAY",
    "BUCKET_YESTERDAY",
    "ORDER_UPDATE_THRESHOLD",
    "RECENT_ACTIVITY_LIMIT",
    "ActivityLog",
    "aggregate_activity",
    "bucket_activity",
    "build_activity_log",
    "classify_activity",
    "filter_activity",
    "format_bucket_label",
    "get_recent_activity",
    "get_user_activity_log",
    "get_user_recent_activity",
    "humanize_action",
    "normalize_activity_filter",
    "normalize_records",
    "sort_activity",
]
