"""Audit sink: log the field changes between two versions of an entity.

Typical use from an update handler::

    trail = AuditTrail.from_config(configure())
    before = repository.get(user_id)
    repository.save(after)
    trail.record("User", user_id, before, after, actor=current_user)

The trail only logs; persisting audit entries is left to whatever consumes
the ``audit_changes`` log events.
"""

from __future__ import annotations

from typing import Any

from fielddiff.engine.compare import DiffEngine
from fielddiff.models.config import FieldDiffConfig
from fielddiff.observability.logging import get_logger

_logger = get_logger("audit")


class AuditTrail:
    """Computes changes with a :class:`DiffEngine` and logs them.

    Args:
        engine:  Engine used to compute the changes.
        enabled: When False, :meth:`record` still returns the changes but
                 logs nothing.
        logger:  Audit sink; defaults to the ``audit`` component logger.
    """

    def __init__(
        self,
        engine: DiffEngine | None = None,
        enabled: bool = True,
        logger: Any = None,
    ) -> None:
        self._engine = engine if engine is not None else DiffEngine()
        self._enabled = enabled
        self._log = logger if logger is not None else _logger

    @classmethod
    def from_config(cls, config: FieldDiffConfig, logger: Any = None) -> AuditTrail:
        return cls(
            engine=DiffEngine.from_config(config),
            enabled=config.audit.enabled,
            logger=logger,
        )

    def record(
        self,
        entity: str,
        entity_id: object,
        old: Any,
        new: Any,
        actor: str | None = None,
    ) -> list[str]:
        """Log the changes between *old* and *new* and return them.

        Nothing is logged when there are no changes.
        """
        changes = self._engine.compare(old, new)
        if changes and self._enabled:
            self._log.info(
                "audit_changes",
                entity=entity,
                entity_id=str(entity_id),
                actor=actor,
                change_count=len(changes),
                changes=changes,
            )
        return changes
