"""Tests for container wiring."""

import asyncio

from fitness_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.session_service is not None
    assert container.dashboard_service.recent_workouts_limit == 3
    asyncio.run(container.close_resources())


def test_settings_fall_back_to_service_key_for_auth(settings) -> None:
    assert settings.auth_api_key == settings.supabase_service_key
