"""Domain value objects."""
from pokerlog.domain.value_objects.category_key import (
    CategoryKey,
    UNSPECIFIED,
    UNSPECIFIED_LABEL,
)
from pokerlog.domain.value_objects.session_stats import (
    CategoryBreakdown,
    ProfitPoint,
    SessionStats,
)

__all__ = [
    "CategoryKey",
    "UNSPECIFIED",
    "UNSPECIFIED_LABEL",
    "CategoryBreakdown",
    "ProfitPoint",
    "SessionStats",
]
