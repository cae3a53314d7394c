"""Services"""

from git_contributor_stats.services.git_stats import (
    aggregate_contributors,
    aggregate_developer_stats,
    count_languages,
    filter_contributors,
    get_developer_stats,
    list_contributors,
)

__all__ = [
    "aggregate_contributors",
    "aggregate_developer_stats",
    "count_languages",
    "filter_contributors",
    "get_developer_stats",
    "list_contributors",
]
