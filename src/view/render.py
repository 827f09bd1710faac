"""
Render model for a workout program

render_program() is a pure projection from (ProgramDocument, NavigationState)
to everything the page shows: header fields, one tab per day, one section per
day and the cooldown. Which tab is active and which day is visible are both
computed from NavigationState.active_day_id, never patched in place.
"""
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote

from config import settings
from src.programs.models import CooldownEntry, Exercise, ProgramDocument, WarmupOption
from .state import NavigationState

WARMUP_TITLE = "🔥 Warm-up (2 Minutes)"
WARMUP_PROMPT = "Choose one of the following options to prepare your body:"
COOLDOWN_TITLE = "Cardio & Stretch (Cool-down)"


def video_search_url(query: str, base_url: Optional[str] = None) -> str:
    """
    Build a video search link for free-text query

    Args:
        query: Search text, e.g. "push up form"
        base_url: Search endpoint ending in the query parameter (default: settings.video_search_url)

    Returns:
        URL with the query percent-encoded (spaces become %20)
    """
    base_url = base_url if base_url is not None else settings.video_search_url
    return f"{base_url}{quote(query, safe='')}"


@dataclass(frozen=True)
class ProgramHeader:
    title: str
    description: str
    primary_goal: str
    safety_note: str
    warmup_duration: str
    workout_moves: str
    cardio_duration: str
    cooldown_duration: str


@dataclass(frozen=True)
class Tab:
    day_id: str
    label: str
    active: bool


@dataclass(frozen=True)
class WarmupBlock:
    title: str
    prompt: str
    options: List[WarmupOption]


@dataclass(frozen=True)
class ExerciseBlock:
    emoji: str
    name: str
    sets: str
    reps: str
    notes: str
    rest: str
    video_url: Optional[str]

    @property
    def title(self) -> str:
        return f"{self.emoji} {self.name}".strip()


@dataclass(frozen=True)
class DaySection:
    day_id: str
    title: str
    visible: bool
    warmup: Optional[WarmupBlock]
    exercises: List[ExerciseBlock]


@dataclass(frozen=True)
class CooldownBlock:
    emoji: str
    name: str
    description: str
    video_url: Optional[str]

    @property
    def title(self) -> str:
        return f"{self.emoji} {self.name}".strip()


@dataclass(frozen=True)
class CooldownSection:
    title: str
    cardio: Optional[CooldownBlock]
    stretch: Optional[CooldownBlock]


@dataclass(frozen=True)
class ProgramRenderModel:
    header: ProgramHeader
    tabs: List[Tab]
    days: List[DaySection]
    cooldown: Optional[CooldownSection]

    def active_tabs(self) -> List[Tab]:
        return [tab for tab in self.tabs if tab.active]

    def visible_sections(self) -> List[DaySection]:
        return [day for day in self.days if day.visible]

    @property
    def visible_day(self) -> DaySection:
        return self.visible_sections()[0]


def build_header(document: ProgramDocument) -> ProgramHeader:
    return ProgramHeader(
        title=document.name,
        description=document.description,
        primary_goal=document.goals.primary,
        safety_note=document.goals.safety,
        warmup_duration=document.structure.warmup,
        workout_moves=document.structure.workout,
        cardio_duration=document.structure.cardio,
        cooldown_duration=document.structure.cooldown,
    )


def build_warmup(document: ProgramDocument) -> Optional[WarmupBlock]:
    """Warm-up block shared by every day; None when the program lists no options"""
    if not document.warmup_options:
        return None
    return WarmupBlock(title=WARMUP_TITLE, prompt=WARMUP_PROMPT, options=list(document.warmup_options))


def build_exercise(exercise: Exercise) -> ExerciseBlock:
    return ExerciseBlock(
        emoji=exercise.emoji,
        name=exercise.name,
        sets=str(exercise.sets),
        reps=str(exercise.reps),
        notes=exercise.notes,
        rest=exercise.rest,
        video_url=video_search_url(exercise.video_query) if exercise.video_query else None,
    )


def build_cooldown_entry(entry: Optional[CooldownEntry]) -> Optional[CooldownBlock]:
    if entry is None:
        return None
    return CooldownBlock(
        emoji=entry.emoji,
        name=entry.name,
        description=entry.description,
        video_url=video_search_url(entry.video_query) if entry.video_query else None,
    )


def build_cooldown(document: ProgramDocument) -> Optional[CooldownSection]:
    cooldown = document.cooldown
    if cooldown is None or (cooldown.cardio is None and cooldown.stretch is None):
        return None
    return CooldownSection(
        title=COOLDOWN_TITLE,
        cardio=build_cooldown_entry(cooldown.cardio),
        stretch=build_cooldown_entry(cooldown.stretch),
    )


def resolve_active_day(document: ProgramDocument, state: Optional[NavigationState]) -> str:
    """The day to show: the state's day if the document has it, else the first day"""
    if state is not None and state.active_day_id in document.day_ids:
        return state.active_day_id
    return document.days[0].id


def render_program(document: ProgramDocument, state: Optional[NavigationState] = None) -> ProgramRenderModel:
    """
    Project a program document into its render model

    Args:
        document: Loaded program
        state: Current navigation state (default: first day active)

    Returns:
        ProgramRenderModel with exactly one active tab and one visible day
    """
    active_day_id = resolve_active_day(document, state)
    warmup = build_warmup(document)

    tabs = [Tab(day_id=day.id, label=day.name, active=day.id == active_day_id) for day in document.days]

    days = [
        DaySection(
            day_id=day.id,
            title=day.name,
            visible=day.id == active_day_id,
            warmup=warmup,
            exercises=[build_exercise(exercise) for exercise in day.exercises],
        )
        for day in document.days
    ]

    return ProgramRenderModel(
        header=build_header(document),
        tabs=tabs,
        days=days,
        cooldown=build_cooldown(document),
    )
