"""GuestService — ad hoc guest-count checks against the group directory."""

from __future__ import annotations

import logging

from caljan.domain.guests import MinGuestsPredicate
from caljan.infrastructure.store import StoreError
from caljan.services.base import BaseService
from caljan.services.result import ServiceResult
from caljan.services.telemetry import traced

logger = logging.getLogger(__name__)


class GuestService(BaseService):
    """Evaluates the large-event predicate outside a clean run."""

    @traced
    def count(self, identifiers: list[str], *, threshold: int | None = None) -> ServiceResult:
        """Check whether *identifiers* expand to at least *threshold* distinct guests.

        Expansion stops as soon as the threshold is met, so ``seen`` is a
        lower bound when ``met`` is True. Cyclic groups are expanded without
        a guard; if the threshold is out of reach the recursion runs out of
        stack and the result is ``RUN_ABORTED``.
        """
        if threshold is None:
            threshold = self._workspace.settings.guests.large_event_min_guests
        try:
            predicate = MinGuestsPredicate(identifiers, threshold, self._workspace.directory)
            met = predicate.test()
        except StoreError as exc:
            return ServiceResult.failure("count_guests", exc.code, exc.message)
        except RecursionError:
            logger.error("Guest expansion of %s did not terminate", ", ".join(identifiers))
            return ServiceResult.failure(
                "count_guests",
                "RUN_ABORTED",
                "Group expansion did not terminate (cyclic group membership?)",
                identifiers=identifiers,
                threshold=threshold,
            )
        return ServiceResult(
            ok=True,
            op="count_guests",
            data={
                "identifiers": identifiers,
                "threshold": threshold,
                "met": met,
                "seen": predicate.seen,
            },
        )
