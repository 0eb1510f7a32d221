"""Tests for settings loading and service wiring."""

from pathlib import Path

import pytest

from rolodex import bootstrap, config
from rolodex.config import Settings, load_settings

SEED = """
contacts:
  - id: "1"
    first_name: John
    last_name: Doe
    phone: "2025551234"
    address: 123 Main St
  - id: "2"
    first_name: Alice
    last_name: Brown
    phone: "0987654321"
    address: 9 Oak
"""


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    """Keep a developer's .env out of these tests."""
    monkeypatch.setattr(config, "load_env", lambda: None)
    for name in ("ROLODEX_LOG_LEVEL", "ROLODEX_PHONE_REGION", "ROLODEX_SEED_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_default_settings() -> None:
    assert load_settings() == Settings(log_level="INFO", phone_region="US", seed_path=None)


def test_settings_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("ROLODEX_LOG_LEVEL", "debug")
    monkeypatch.setenv("ROLODEX_PHONE_REGION", "it")
    monkeypatch.setenv("ROLODEX_SEED_PATH", str(tmp_path / "seed.yaml"))
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.phone_region == "IT"
    assert settings.seed_path == (tmp_path / "seed.yaml").resolve()


def test_unknown_log_level_raises(monkeypatch) -> None:
    monkeypatch.setenv("ROLODEX_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="Unknown log level"):
        load_settings()


def test_build_service_without_seed_is_empty() -> None:
    service = bootstrap.build_service(Settings())
    assert service.size() == 0


def test_build_service_seeds_and_formats_phone(tmp_path: Path) -> None:
    seed = tmp_path / "seed.yaml"
    seed.write_text(SEED)
    service = bootstrap.build_service(Settings(seed_path=seed))
    assert service.size() == 2
    assert [c.last_name for c in service.get_contacts_sorted_by_name()] == ["Brown", "Doe"]
    assert service.get_contact_summary("1").phone == "(202) 555-1234"


def test_build_service_reads_env(monkeypatch, tmp_path: Path) -> None:
    seed = tmp_path / "seed.yaml"
    seed.write_text(SEED)
    monkeypatch.setenv("ROLODEX_SEED_PATH", str(seed))
    service = bootstrap.build_service()
    assert "2" in service
