"""
Pydantic models for workout program documents
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Union


class DocumentModel(BaseModel):
    """Base for all program document parts: camelCase JSON keys, immutable once parsed"""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class Goals(DocumentModel):
    primary: str
    safety: str = ""


class Structure(DocumentModel):
    """Free-text durations shown in the program header"""

    warmup: str = ""
    workout: str = ""
    cardio: str = ""
    cooldown: str = ""


class WarmupOption(DocumentModel):
    emoji: str = ""
    name: str
    description: str = ""
    duration: str = ""


class Exercise(DocumentModel):
    emoji: str = ""
    name: str
    sets: Union[int, str] = ""
    reps: Union[int, str] = ""
    notes: str = ""
    rest: str = ""
    video_query: Optional[str] = Field(default=None, alias="videoQuery")


class CooldownEntry(DocumentModel):
    emoji: str = ""
    name: str
    description: str = ""
    video_query: Optional[str] = Field(default=None, alias="videoQuery")


class Cooldown(DocumentModel):
    cardio: Optional[CooldownEntry] = None
    stretch: Optional[CooldownEntry] = None


class Day(DocumentModel):
    id: str
    name: str
    exercises: List[Exercise] = []


class ProgramDocument(DocumentModel):
    """A complete multi-day workout program as stored in data/<program_id>.json"""

    name: str
    description: str = ""
    goals: Goals
    structure: Structure
    warmup_options: List[WarmupOption] = Field(default=[], alias="warmupOptions")
    days: List[Day]
    cooldown: Optional[Cooldown] = None

    @field_validator("days")
    @classmethod
    def check_days(cls, days: List[Day]) -> List[Day]:
        if not days:
            raise ValueError("a program needs at least one day")
        seen = set()
        for day in days:
            if day.id in seen:
                raise ValueError(f"duplicate day id '{day.id}'")
            seen.add(day.id)
        return days

    @property
    def day_ids(self) -> List[str]:
        return [day.id for day in self.days]

    def get_day(self, day_id: str) -> Optional[Day]:
        for day in self.days:
            if day.id == day_id:
                return day
        return None


class ProgramSummary(DocumentModel):
    """Metadata shown on the program selection screen"""

    id: str
    name: str
    description: str = ""
    goals: Goals
    structure: Structure

    @classmethod
    def from_document(cls, program_id: str, document: ProgramDocument) -> "ProgramSummary":
        return cls(
            id=program_id,
            name=document.name,
            description=document.description,
            goals=document.goals,
            structure=document.structure,
        )
