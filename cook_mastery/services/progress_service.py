"""Progress aggregation across difficulty levels."""

import logging
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from cook_mastery.config import get_settings
from cook_mastery.models.enums import DifficultyLevel
from cook_mastery.schemas.profile import LevelProgress, ProgressSummary
from cook_mastery.services.content_service import CONTENT_TYPES

logger = logging.getLogger(__name__)

settings = get_settings()


def completion_percent(completed_count: int, total_count: int) -> float:
    """Share of completed items in percent; 0 when there is nothing to complete."""
    if total_count <= 0:
        return 0.0
    return completed_count / total_count * 100


def can_advance(
    selected_level: DifficultyLevel,
    percent: float,
    threshold: float | None = None,
) -> bool:
    """Check if a user may move past ``selected_level``."""
    if threshold is None:
        threshold = settings.advance_threshold_percent
    return percent >= threshold and not selected_level.is_highest()


def summarize(
    user_id: UUID,
    selected_level: DifficultyLevel,
    rows: list[dict],
) -> ProgressSummary:
    """Build the summary from per-level rows.

    ``rows`` may omit levels; those are reported with zero counts so the
    result always lists the three levels in canonical order.
    """
    by_level = {DifficultyLevel(row["level"]): row for row in rows}

    level_progress = []
    for level in DifficultyLevel.ordered():
        row = by_level.get(level)
        if row is None:
            level_progress.append(
                LevelProgress(
                    level=level,
                    total_count=0,
                    completed_count=0,
                    completion_percent=0.0,
                    is_up_to_date=False,
                )
            )
            continue
        total_count = row.get("total_count") or 0
        completed_count = row.get("completed_count") or 0
        level_progress.append(
            LevelProgress(
                level=level,
                total_count=total_count,
                completed_count=completed_count,
                completion_percent=completion_percent(completed_count, total_count),
                is_up_to_date=bool(row.get("is_up_to_date")),
            )
        )

    selected = next(lp for lp in level_progress if lp.level == selected_level)
    return ProgressSummary(
        user_id=user_id,
        selected_level=selected_level,
        level_progress=level_progress,
        can_advance=can_advance(selected_level, selected.completion_percent),
    )


class ProgressService:
    """Service for per-user learning progress."""

    def __init__(self, db: Session):
        self.db = db

    def level_rows(self, user_id: UUID) -> list[dict]:
        """Per-level totals and the user's completed counts over all content types.

        Only levels with published content or completions appear.
        """
        totals: dict[DifficultyLevel, int] = {}
        completed: dict[DifficultyLevel, int] = {}

        for content_type in CONTENT_TYPES.values():
            model = content_type.model
            completion = content_type.completion_model

            for level, count in (
                self.db.query(model.level, func.count(model.id)).group_by(model.level).all()
            ):
                totals[level] = totals.get(level, 0) + count

            for level, count in (
                self.db.query(model.level, func.count(model.id))
                .join(completion, content_type.completion_content_column == model.id)
                .filter(completion.user_id == user_id)
                .group_by(model.level)
                .all()
            ):
                completed[level] = completed.get(level, 0) + count

        rows = []
        for level in DifficultyLevel.ordered():
            if level not in totals and level not in completed:
                continue
            total_count = totals.get(level, 0)
            completed_count = completed.get(level, 0)
            rows.append(
                {
                    "level": level,
                    "total_count": total_count,
                    "completed_count": completed_count,
                    "is_up_to_date": total_count > 0
                    and completion_percent(completed_count, total_count)
                    >= settings.advance_threshold_percent,
                }
            )
        return rows

    def get_summary(self, user_id: UUID, selected_level: DifficultyLevel) -> ProgressSummary:
        """Progress summary for the user's selected level."""
        return summarize(user_id, selected_level, self.level_rows(user_id))
