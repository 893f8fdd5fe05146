"""
Domain entity representing a user goal.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from app.domain.entities.care_plan import GoalTemplate
from app.domain.utils.datetime_utils import now_utc


@dataclass(kw_only=True)
class Goal:
    """A goal the user can tick off. Only `completed` changes after creation."""

    user_id: str
    title: str
    description: str | None = None
    care_plan_id: UUID | None = None
    completed: bool = False
    id: UUID = field(default_factory=uuid4)
    date: datetime = field(default_factory=now_utc)

    @classmethod
    def from_template(
        cls,
        template: GoalTemplate,
        user_id: str,
        care_plan_id: UUID | None,
        date: datetime | None = None,
    ) -> "Goal":
        return cls(
            user_id=user_id,
            title=template.title,
            description=template.description,
            care_plan_id=care_plan_id,
            date=date or now_utc(),
        )

    @property
    def is_open_template_goal(self) -> bool:
        """Open goal that came from a care plan; replaced when a newer plan is stored."""
        return self.care_plan_id is not None and not self.completed
