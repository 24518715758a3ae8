"""Workspace — the single dependency injected into every service.

Bundles the settings, the collaborators (calendar, directory, mailer,
identity), and the plugin manager. Collaborators default to a
:class:`JsonCalendarStore` loaded lazily from the configured path.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from caljan.infrastructure.store import JsonCalendarStore

if TYPE_CHECKING:
    from caljan.config.settings import CaljanSettings
    from caljan.domain.collaborators import CalendarSource, GroupDirectory, Identity, MailSender
    from caljan.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class Workspace:
    """Collaborators plus configuration for one run.

    Pass *calendar*, *directory*, *mailer*, and *identity* explicitly to run
    against other backends; anything omitted comes from the JSON store.
    """

    def __init__(
        self,
        settings: CaljanSettings,
        *,
        store_path: str | None = None,
        calendar: CalendarSource | None = None,
        directory: GroupDirectory | None = None,
        mailer: MailSender | None = None,
        identity: Identity | None = None,
    ) -> None:
        self.settings = settings
        self.store_path = settings.resolve_store_path(store_path)
        self._store: JsonCalendarStore | None = None
        self._calendar = calendar
        self._directory = directory
        self._mailer = mailer
        self._identity = identity
        self.plugins: PluginManager | None = None

    @property
    def store(self) -> JsonCalendarStore:
        """The JSON store (loaded on first access; raises StoreError)."""
        if self._store is None:
            self._store = JsonCalendarStore.load(self.store_path)
        return self._store

    @property
    def calendar(self) -> CalendarSource:
        return self._calendar if self._calendar is not None else self.store

    @property
    def directory(self) -> GroupDirectory:
        return self._directory if self._directory is not None else self.store

    @property
    def mailer(self) -> MailSender:
        return self._mailer if self._mailer is not None else self.store

    @property
    def identity(self) -> Identity:
        return self._identity if self._identity is not None else self.store

    def init_plugins(self) -> None:
        """Create the plugin manager and load entry point plugins."""
        from caljan.plugins.manager import PluginManager

        self.plugins = PluginManager()
        names = self.plugins.discover_and_load()
        logger.debug("Plugins loaded: %s", names)

    def commit(self) -> None:
        """Persist store changes, if the store is in use."""
        if self._store is not None:
            self._store.save()
