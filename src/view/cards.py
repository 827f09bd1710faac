"""
HTML cards for the Streamlit page (shown with unsafe_allow_html=True)

All program text is escaped before it is placed in markup.
"""
from html import escape

from src.programs.models import ProgramSummary
from .render import CooldownBlock, ExerciseBlock, WarmupBlock

CARD_STYLE = (
    "background-color: white; "
    "border: 1px solid #e2e8f0; "
    "border-radius: 12px; "
    "padding: 16px 20px; "
    "margin-bottom: 12px; "
    "box-shadow: 0 4px 6px rgba(15, 23, 42, 0.08);"
)

WARMUP_STYLE = (
    "background: linear-gradient(to right, #ecfdf5, #eff6ff); "
    "border: 2px solid #6ee7b7; "
    "border-radius: 12px; "
    "padding: 16px 20px; "
    "margin-bottom: 12px;"
)

LINK_STYLE = (
    "display: inline-block; "
    "background-color: #2563eb; "
    "color: white; "
    "padding: 8px 16px; "
    "border-radius: 8px; "
    "font-weight: 600; "
    "text-decoration: none;"
)


def video_link_html(url: str, label: str) -> str:
    return (
        f'<a href="{escape(url)}" target="_blank" rel="noopener" style="{LINK_STYLE}">'
        f"{escape(label)}</a>"
    )


def warmup_card_html(block: WarmupBlock) -> str:
    """Warm-up card listing every interchangeable option"""
    options = "".join(
        '<div style="background-color: white; border: 1px solid #a7f3d0; border-radius: 8px; padding: 12px;">'
        f'<div><span style="font-size: 1.5rem; margin-right: 8px;">{escape(option.emoji)}</span>'
        f"<strong>{escape(option.name)}</strong></div>"
        f'<p style="font-size: 0.8rem; color: #475569; margin: 4px 0;">{escape(option.description)}</p>'
        f'<p style="font-size: 0.8rem; color: #047857; font-weight: 600; margin: 0;">Duration: {escape(option.duration)}</p>'
        "</div>"
        for option in block.options
    )
    return (
        f'<div class="warmup-block" style="{WARMUP_STYLE}">'
        f'<h3 style="color: #047857; margin-top: 0;">{escape(block.title)}</h3>'
        f'<p style="font-size: 0.9rem;">{escape(block.prompt)}</p>'
        f'<div style="display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 12px;">{options}</div>'
        "</div>"
    )


def exercise_card_html(block: ExerciseBlock) -> str:
    """Exercise card: name, sets/reps/notes, rest and a demo video link"""
    details = f"<strong>Sets:</strong> {escape(block.sets)} | <strong>Reps:</strong> {escape(block.reps)}"
    if block.notes:
        details += f" | {escape(block.notes)}"

    rest = ""
    if block.rest:
        rest = f'<p style="font-size: 0.8rem; color: #d97706; margin: 4px 0 0;">⏱️ <strong>Rest:</strong> {escape(block.rest)}</p>'

    link = video_link_html(block.video_url, "Watch Demo") if block.video_url else ""

    return (
        f'<div class="exercise-block" style="{CARD_STYLE}">'
        '<div style="display: flex; justify-content: space-between; align-items: center; gap: 16px; flex-wrap: wrap;">'
        f'<div><h3 style="margin: 0;">{escape(block.title)}</h3>'
        f'<p style="font-size: 0.9rem; color: #475569; margin: 4px 0 0;">{details}</p>{rest}</div>'
        f"{link}</div></div>"
    )


def cooldown_card_html(block: CooldownBlock, link_label: str = "View Stretching Guide") -> str:
    """Cool-down entry card; the link appears only when the entry has a video query"""
    link = video_link_html(block.video_url, link_label) if block.video_url else ""
    return (
        f'<div class="cooldown-block" style="{CARD_STYLE}">'
        '<div style="display: flex; justify-content: space-between; align-items: center; gap: 16px; flex-wrap: wrap;">'
        f'<div><h3 style="margin: 0;">{escape(block.title)}</h3>'
        f'<p style="font-size: 0.9rem; color: #475569; margin: 4px 0 0;">{escape(block.description)}</p></div>'
        f"{link}</div></div>"
    )


def program_card_html(summary: ProgramSummary) -> str:
    """Selection-screen card with the program's goal and structure"""
    structure = summary.structure
    return (
        f'<div class="program-card" style="{CARD_STYLE}">'
        f'<h2 style="color: #1d4ed8; margin-top: 0;">{escape(summary.name)}</h2>'
        f'<p style="color: #475569;">{escape(summary.description)}</p>'
        '<div style="display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 12px;">'
        '<div style="background-color: #ecfdf5; border-left: 4px solid #10b981; padding: 12px;">'
        '<strong style="font-size: 0.9rem;">🎯 Primary Goal</strong>'
        f'<p style="font-size: 0.8rem; margin: 4px 0 0;">{escape(summary.goals.primary)}</p></div>'
        '<div style="background-color: #eff6ff; border-left: 4px solid #3b82f6; padding: 12px;">'
        '<strong style="font-size: 0.9rem;">📋 Structure</strong>'
        f'<p style="font-size: 0.8rem; margin: 4px 0 0;">'
        f"Warmup: {escape(structure.warmup)} • Workout: {escape(structure.workout)}<br>"
        f"Cardio: {escape(structure.cardio)} • Cooldown: {escape(structure.cooldown)}</p></div>"
        "</div></div>"
    )
