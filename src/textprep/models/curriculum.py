"""Models for a parsed learning-curriculum table."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class CurriculumTopic(BaseModel):
    """One row of a curriculum table."""

    topic: str = Field(..., min_length=1, description="Topic name")
    why_it_matters: str = Field(default="", description="Motivation for the topic")
    key_skills: List[str] = Field(
        default_factory=list, description="Key sub-skills / APIs, split on commas and semicolons"
    )
    mini_exercise: str = Field(default="", description="Short practice exercise")
    estimated_study_time: str = Field(default="", description="Study time as written")
    study_hours: Optional[float] = Field(
        default=None, ge=0, description="Study time in hours, if it could be parsed"
    )


class Curriculum(BaseModel):
    """An ordered list of curriculum topics."""

    topics: List[CurriculumTopic] = Field(default_factory=list)

    def total_study_hours(self) -> float:
        """Sum of parsed study hours; topics without a parsed time count as 0."""
        return round(sum(t.study_hours or 0.0 for t in self.topics), 2)

    def to_rows(self) -> List[Dict[str, str]]:
        """Flatten topics into dictionaries keyed by the table column names."""
        return [
            {
                "Topic": t.topic,
                "Why it matters": t.why_it_matters,
                "Key sub-skills/APIs": ", ".join(t.key_skills),
                "Mini exercise": t.mini_exercise,
                "Estimated study time": t.estimated_study_time,
            }
            for t in self.topics
        ]
