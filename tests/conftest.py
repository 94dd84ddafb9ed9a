"""Pytest configuration and fixtures for nc-quota tests."""

import pytest

from core.domain.models import UserRecord


class FakeUserDirectory:
    """In-memory user directory."""

    def __init__(self, uids):
        self.users = [UserRecord(uid=uid) for uid in uids]
        self.calls = 0

    def list_users(self):
        self.calls += 1
        return list(self.users)


class FakeQuotaService:
    """Records every quota change instead of running occ."""

    def __init__(self, statuses=None):
        self.calls = []
        self.statuses = statuses or {}

    def set_quota(self, user, quota):
        self.calls.append((user.uid, quota.literal))
        return self.statuses.get(user.uid, 0)


@pytest.fixture
def directory():
    return FakeUserDirectory(["alice", "bob", "carol"])


@pytest.fixture
def service():
    return FakeQuotaService()


@pytest.fixture
def cli_fakes(monkeypatch, directory, service):
    """Route the CLI's occ adapters to the in-memory fakes."""
    import cli.main

    monkeypatch.setattr(cli.main, "OccUserDirectory", lambda settings: directory)
    monkeypatch.setattr(cli.main, "OccQuotaService", lambda settings: service)
    return directory, service
