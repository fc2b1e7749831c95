"""Tests for deterministic daily prompt selection."""

from datetime import date, datetime, timezone

from app.crud.daily_prompt import crud_daily_prompt
from app.data.prompt_repository import DEFAULT_PROMPTS, FALLBACK_PROMPT
from app.schemas.prompt import DailyPromptCreate, DailyPromptUpdate
from app.services.prompt import day_seed, pick_for_day, prompt_service


def test_day_seed():
    assert day_seed(date(2024, 1, 2)) == 20240102


def test_pick_for_day():
    items = ["a", "b", "c"]
    assert pick_for_day(items, date(2024, 1, 2)) == items[20240102 % 3]
    assert pick_for_day([], date(2024, 1, 2)) is None


def test_seeds_defaults_on_first_request(db):
    prompt = prompt_service.get_prompt_of_the_day(db, now=datetime(2024, 1, 2, 6, 0, tzinfo=timezone.utc))
    assert crud_daily_prompt.count_active(db) == len(DEFAULT_PROMPTS)
    assert prompt.content == DEFAULT_PROMPTS[20240102 % len(DEFAULT_PROMPTS)]["content"]


def test_same_prompt_all_day(db):
    morning = prompt_service.get_prompt_of_the_day(db, now=datetime(2024, 5, 5, 0, 0, tzinfo=timezone.utc))
    evening = prompt_service.get_prompt_of_the_day(db, now=datetime(2024, 5, 5, 18, 0, tzinfo=timezone.utc))
    assert morning.id == evening.id


def test_uses_local_day_not_utc_date(db):
    # 19:00Z on Jan 1st is Jan 2nd locally: seed 20240102, not 20240101
    prompt = prompt_service.get_prompt_of_the_day(db, now=datetime(2024, 1, 1, 19, 0, tzinfo=timezone.utc))
    assert prompt.content == DEFAULT_PROMPTS[20240102 % 10]["content"]
    assert prompt.content != DEFAULT_PROMPTS[20240101 % 10]["content"]


def test_no_reseed_when_prompts_exist(db):
    prompt_service.create_prompt(db, DailyPromptCreate(content="Only one", category="custom"))
    prompt = prompt_service.get_prompt_of_the_day(db)
    assert prompt.content == "Only one"
    assert crud_daily_prompt.count_active(db) == 1


def test_inactive_prompts_are_skipped(db):
    first = prompt_service.create_prompt(db, DailyPromptCreate(content="Retired"))
    prompt_service.create_prompt(db, DailyPromptCreate(content="Current"))
    prompt_service.update_prompt(db, first.id, DailyPromptUpdate(is_active=False))

    assert prompt_service.get_prompt_of_the_day(db).content == "Current"
    assert len(prompt_service.list_prompts(db, include_inactive=True)) == 2


def test_fallback_when_store_stays_empty(db, monkeypatch):
    monkeypatch.setattr(crud_daily_prompt, "create_many", lambda db, items: 0)
    prompt = prompt_service.get_prompt_of_the_day(db)
    assert prompt.content == FALLBACK_PROMPT
    assert prompt.id is None


def test_prompt_endpoint(client):
    first = client.get("/prompts").json()
    second = client.get("/prompts").json()
    assert first == second
    assert first["content"] in {p["content"] for p in DEFAULT_PROMPTS}
    assert len(client.get("/prompts/all").json()) == len(DEFAULT_PROMPTS)


def test_create_and_retire_prompt(client):
    created = client.post("/prompts", json={"content": "New prompt", "category": "reflection"})
    assert created.status_code == 201
    prompt_id = created.json()["id"]

    retired = client.patch(f"/prompts/{prompt_id}", json={"is_active": False}).json()
    assert retired["is_active"] is False
    assert client.patch("/prompts/00000000-0000-0000-0000-000000000000", json={}).status_code == 404


def test_patch_cannot_null_required_fields(client):
    prompt_id = client.post("/prompts", json={"content": "Keep me"}).json()["id"]
    for field in ("content", "is_active"):
        response = client.patch(f"/prompts/{prompt_id}", json={field: None})
        assert response.status_code == 422, field
    assert client.get("/prompts/all").json()[0]["content"] == "Keep me"
