"""
Shared fixtures: program documents and a temporary data directory
"""
import json

import pytest

from src.programs.models import ProgramDocument
from src.programs.source import ProgramSource


def build_program(name="Test Program", days=3, exercises_per_day=2, cooldown=True):
    """Build a raw program dict in the on-disk JSON shape"""
    program = {
        "name": name,
        "description": f"{name} description",
        "goals": {"primary": "Get stronger", "safety": "Stop if it hurts"},
        "structure": {"warmup": "2 min", "workout": "5 moves", "cardio": "10 min", "cooldown": "5 min"},
        "warmupOptions": [
            {"emoji": "🏃", "name": "Jog", "description": "Easy jog", "duration": "2 min"},
            {"emoji": "🦘", "name": "Jumping Jacks", "description": "Steady pace", "duration": "2 min"},
        ],
        "days": [
            {
                "id": f"day{d}",
                "name": f"Day {d}",
                "exercises": [
                    {
                        "emoji": "💪",
                        "name": f"Exercise {d}.{e}",
                        "sets": 3,
                        "reps": "10",
                        "notes": "Slow and controlled",
                        "rest": "30s",
                        "videoQuery": f"exercise {d} {e} form",
                    }
                    for e in range(1, exercises_per_day + 1)
                ],
            }
            for d in range(1, days + 1)
        ],
    }
    if cooldown:
        program["cooldown"] = {
            "cardio": {"emoji": "🚴", "name": "Bike", "description": "10 min easy"},
            "stretch": {
                "emoji": "🧘",
                "name": "Stretch",
                "description": "Hold each stretch",
                "videoQuery": "full body stretch",
            },
        }
    return program


@pytest.fixture
def program_data():
    return build_program()


@pytest.fixture
def program_document(program_data):
    return ProgramDocument.model_validate(program_data)


@pytest.fixture
def data_dir(tmp_path):
    """Directory with two valid programs and one malformed file"""
    (tmp_path / "alpha.json").write_text(json.dumps(build_program("Alpha")), encoding="utf-8")
    (tmp_path / "beta.json").write_text(json.dumps(build_program("Beta", days=2)), encoding="utf-8")
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    return tmp_path


@pytest.fixture
def source(data_dir):
    return ProgramSource(location=str(data_dir))


@pytest.fixture
def make_program():
    """Factory for raw program dicts"""
    return build_program
