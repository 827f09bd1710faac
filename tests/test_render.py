"""
Unit tests for the program render model
"""
from src.programs.models import ProgramDocument
from src.view.render import render_program, video_search_url
from src.view.state import NavigationState, ViewStatus


def loaded_state(day_id):
    return NavigationState(status=ViewStatus.LOADED, active_program_id="test", active_day_id=day_id)


def test_three_days_two_exercises(program_document):
    """Test 3 days x 2 exercises give 3 tabs and 3 sections of 1 warm-up + 2 exercises"""
    model = render_program(program_document)

    assert [tab.label for tab in model.tabs] == ["Day 1", "Day 2", "Day 3"]
    assert len(model.days) == 3
    for section in model.days:
        assert section.warmup is not None
        assert len(section.warmup.options) == 2
        assert len(section.exercises) == 2


def test_first_day_active_by_default(program_document):
    """Test day 1 is the only visible section and the only active tab"""
    model = render_program(program_document)

    assert [tab.day_id for tab in model.active_tabs()] == ["day1"]
    assert [day.day_id for day in model.visible_sections()] == ["day1"]


def test_active_day_follows_state(program_document):
    """Test every day can be the single visible one"""
    for day_id in program_document.day_ids:
        model = render_program(program_document, loaded_state(day_id))

        assert [tab.day_id for tab in model.active_tabs()] == [day_id]
        assert [day.day_id for day in model.visible_sections()] == [day_id]


def test_unknown_state_day_falls_back_to_first(program_document):
    """Test a state day missing from the document still shows exactly one day"""
    model = render_program(program_document, loaded_state("day42"))

    assert [day.day_id for day in model.visible_sections()] == ["day1"]


def test_scenario_push_up():
    """Test single-day program with one exercise renders the expected card and link"""
    document = ProgramDocument.model_validate({
        "name": "Scenario",
        "goals": {"primary": "Move"},
        "structure": {"warmup": "2 min", "workout": "1 move", "cardio": "5 min", "cooldown": "5 min"},
        "days": [{
            "id": "day1",
            "name": "Day 1",
            "exercises": [{"name": "Push-up", "sets": 3, "reps": "10", "rest": "30s", "videoQuery": "push up form"}],
        }],
        "warmupOptions": [{"emoji": "🏃", "name": "Jog", "description": "Easy", "duration": "2 min"}],
        "cooldown": {
            "cardio": {"emoji": "🚴", "name": "Bike", "description": "Easy spin"},
            "stretch": {"name": "Stretch", "videoQuery": "full body stretch"},
        },
    })

    model = render_program(document)

    assert model.active_tabs()[0].label == "Day 1"
    exercises = model.visible_day.exercises
    assert len(exercises) == 1
    assert exercises[0].name == "Push-up"
    assert exercises[0].sets == "3"
    assert "search_query=push%20up%20form" in exercises[0].video_url
    assert model.cooldown.stretch.video_url.endswith("search_query=full%20body%20stretch")
    assert model.cooldown.cardio.video_url is None


def test_missing_cooldown_skipped(make_program):
    """Test a program without cooldown renders no cooldown section"""
    document = ProgramDocument.model_validate(make_program(cooldown=False))
    assert render_program(document).cooldown is None


def test_no_warmup_options(make_program):
    """Test days render without a warm-up block when no options exist"""
    data = make_program()
    data["warmupOptions"] = []
    model = render_program(ProgramDocument.model_validate(data))

    assert all(day.warmup is None for day in model.days)


def test_header_fields(program_document):
    """Test header mirrors goals and structure"""
    header = render_program(program_document).header

    assert header.title == "Test Program"
    assert header.primary_goal == "Get stronger"
    assert header.safety_note == "Stop if it hurts"
    assert header.workout_moves == "5 moves"
    assert header.cooldown_duration == "5 min"


def test_video_search_url_encodes_query():
    """Test special characters in queries are escaped"""
    url = video_search_url("squat & lunge / form?", base_url="https://videos.example/search?q=")

    assert url == "https://videos.example/search?q=squat%20%26%20lunge%20%2F%20form%3F"


def test_render_is_deterministic(program_document):
    """Test rendering the same inputs twice gives equal models"""
    state = loaded_state("day2")
    assert render_program(program_document, state) == render_program(program_document, state)
