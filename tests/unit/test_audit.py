"""Tests for the AuditTrail log sink."""

from __future__ import annotations

from dataclasses import dataclass
from unittest.mock import MagicMock

from fielddiff.audit import AuditTrail
from fielddiff.models.config import FieldDiffConfig
from fielddiff.schema.markers import diff_field, diff_id


@dataclass
class User:
    user_id: int = diff_id()
    name: str = diff_field("Name", default="")
    email: str = diff_field("Email", default="")


class TestAuditTrail:
    def test_logs_changes(self) -> None:
        log = MagicMock()
        trail = AuditTrail(logger=log)
        changes = trail.record("User", 7, User(7, "Ann"), User(7, "Anna"), actor="admin")

        assert changes == ["Name changed from [Ann] to [Anna]"]
        log.info.assert_called_once_with(
            "audit_changes",
            entity="User",
            entity_id="7",
            actor="admin",
            change_count=1,
            changes=["Name changed from [Ann] to [Anna]"],
        )

    def test_no_changes_not_logged(self) -> None:
        log = MagicMock()
        trail = AuditTrail(logger=log)
        assert trail.record("User", 7, User(7, "Ann"), User(7, "Ann")) == []
        log.info.assert_not_called()

    def test_disabled_returns_changes_without_logging(self) -> None:
        log = MagicMock()
        trail = AuditTrail(enabled=False, logger=log)
        assert trail.record("User", 7, User(7, "Ann"), User(7, "Bob")) == [
            "Name changed from [Ann] to [Bob]"
        ]
        log.info.assert_not_called()

    def test_creation_is_recorded(self) -> None:
        log = MagicMock()
        trail = AuditTrail(logger=log)
        changes = trail.record("User", 8, None, User(8, "Cy", "cy@example.com"))
        assert changes == [" changed from [] to [{Name=Cy, Email=cy@example.com}]"]

    def test_from_config(self) -> None:
        config = FieldDiffConfig()
        config.format.locale = "zh"
        config.audit.enabled = False
        log = MagicMock()
        trail = AuditTrail.from_config(config, logger=log)
        assert trail.record("User", 1, User(1, "A"), User(1, "B")) == ["Name 由 [A] 变更成 [B]"]
        log.info.assert_not_called()
