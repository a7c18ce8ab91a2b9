from __future__ import annotations

from src.hr_portal.hr_portal.database.connection import DBConfig, DatabaseConnection


def test_factory_is_shared_until_the_config_changes(monkeypatch):
    monkeypatch.setattr(DatabaseConnection, "_shared", None)
    local = DBConfig.from_dict({"database": "hr_portal"})

    first = DatabaseConnection.get_instance(local)

    assert DatabaseConnection.get_instance(DBConfig.from_dict({"database": "hr_portal"})) is first
    other = DatabaseConnection.get_instance(DBConfig.from_dict({"database": "hr_portal_test"}))
    assert other is not first
    assert DatabaseConnection.get_instance(DBConfig.from_dict({"database": "hr_portal_test"})) is other


def test_describe_omits_password():
    config = DBConfig.from_dict({"user": "hr", "password": "secret", "host": "db", "port": "3307"})

    assert config.describe() == "hr@db:3307/hr_portal"
