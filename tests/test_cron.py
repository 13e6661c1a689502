from datetime import date

import pytest

from binbot import create_app
from binbot.services.reminders import ReminderResult

SECRET = {"X-CRON-SECRET": "test-secret"}


@pytest.fixture
def app():
    return create_app({
        "TESTING": True,
        "CRON_SECRET": "test-secret",
        "LOOKUP_URL": "https://bins.example/lookup.txt",
        "ADDRESS_CODE": "100012345",
        "NOTIFY_MODE": "fake",
    })


@pytest.fixture
def client(app):
    return app.test_client()


def test_ping_requires_secret(client):
    assert client.post("/cron/ping").status_code == 401
    assert client.post("/cron/ping", headers={"X-CRON-SECRET": "nope"}).status_code == 401


def test_ping(client):
    resp = client.post("/cron/ping", headers=SECRET)
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}


def test_send_bin_reminder_requires_secret(client, monkeypatch):
    called = []
    monkeypatch.setattr("binbot.routes.cron.send_bin_reminder", lambda settings: called.append(settings))

    assert client.post("/cron/send-bin-reminder").status_code == 401
    assert called == []


def test_send_bin_reminder_reports_result(client, monkeypatch):
    seen = {}

    def fake_send(settings):
        seen["settings"] = settings
        return ReminderResult(message="Put out Brown Bin for tomorrow", bin_label="Brown Bin")

    monkeypatch.setattr("binbot.routes.cron.send_bin_reminder", fake_send)

    resp = client.post("/cron/send-bin-reminder", headers=SECRET)
    assert resp.status_code == 200
    assert resp.get_json() == {
        "sent": True,
        "message": "Put out Brown Bin for tomorrow",
        "bin": "Brown Bin",
        "error": None,
    }
    assert seen["settings"].address_code == "100012345"


def test_send_bin_reminder_reports_error(client, monkeypatch):
    monkeypatch.setattr(
        "binbot.routes.cron.send_bin_reminder",
        lambda settings: ReminderResult(message="Error: boom", error="boom"),
    )

    body = client.post("/cron/send-bin-reminder", headers=SECRET).get_json()
    assert body["sent"] is True
    assert body["error"] == "boom"
    assert body["bin"] is None


def test_cli_send_reminder_uses_date_option(app, monkeypatch):
    seen = {}

    def fake_send(settings, today=None):
        seen["today"] = today
        return ReminderResult()

    monkeypatch.setattr("binbot.services.reminders.send_bin_reminder", fake_send)

    result = app.test_cli_runner().invoke(args=["send-reminder", "--date", "2024-02-28"])
    assert result.exit_code == 0
    assert seen["today"] == date(2024, 2, 28)
    assert "nothing sent" in result.output


def test_send_bin_reminder_without_lookup_url_aborts(monkeypatch):
    from binbot.errors import ConfigError

    called = []
    monkeypatch.setattr("binbot.routes.cron.send_bin_reminder", lambda settings: called.append(settings))
    app = create_app({"TESTING": True, "CRON_SECRET": "test-secret", "LOOKUP_URL": "", "ADDRESS_CODE": "1"})

    with pytest.raises(ConfigError):
        app.test_client().post("/cron/send-bin-reminder", headers=SECRET)
    assert called == []
