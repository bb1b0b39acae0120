"""
Dashboard view-state controller.

Owns the Loading -> Ready | Failed state machine around one fetch of the
document store:
1. activate() enters Loading and fetches every document
2. The result is partitioned into invoices, quotations and proformas
3. Success ends in Ready, any fetch or classification error in Failed

Each activation gets a sequence number. A fetch that completes after a
newer activation has started is discarded, so a slow response can never
overwrite newer state.
"""

import logging
from dataclasses import dataclass

from billdesk.domain.classification import partition
from billdesk.domain.errors import DashboardError
from billdesk.domain.models import Partitions
from billdesk.infrastructure.store import DocumentStore

from .navigation import Navigator
from .notifications import Notifier

logger = logging.getLogger(__name__)


LOAD_ERROR_TITLE = "Error"
LOAD_ERROR_MESSAGE = "Failed to load invoices"


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight."""
    activation: int = 0


@dataclass(frozen=True)
class Ready:
    """
    The fetch succeeded.

    Partitions may all be empty; that is the empty dashboard, not an error.
    """
    partitions: Partitions
    activation: int = 0

    @property
    def is_empty(self) -> bool:
        return self.partitions.is_empty


@dataclass(frozen=True)
class Failed:
    """The fetch or the partitioning failed. No documents are kept."""
    error: DashboardError
    activation: int = 0


ViewState = Loading | Ready | Failed


class DashboardController:
    """
    Drives one dashboard session.

    The controller is the only writer of its state; renderers read
    `state`, `loading` and `partitions`.

    Example:
        controller = DashboardController(
            store=SqlDocumentStore(),
            notifier=LoggingNotifier(),
        )

        state = await controller.activate()

        if isinstance(state, Ready):
            print(len(state.partitions.invoices))
    """

    def __init__(
        self,
        store: DocumentStore,
        notifier: Notifier,
        navigator: Navigator | None = None,
    ) -> None:
        """
        Initialize the controller in the Loading state.

        Args:
            store: Source of documents
            notifier: Receives one error notification per failed activation
            navigator: Target of the create/edit/settings actions (optional)
        """
        self.store = store
        self.notifier = notifier
        self.navigator = navigator
        self._activation = 0
        self._state: ViewState = Loading()

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def partitions(self) -> Partitions | None:
        """Current partitions, or None unless the state is Ready."""
        if isinstance(self._state, Ready):
            return self._state.partitions
        return None

    @property
    def activation(self) -> int:
        """Sequence number of the most recent activation."""
        return self._activation

    async def activate(self) -> ViewState:
        """
        Fetch and partition all documents.

        Restarts from Loading and drops whatever the previous activation
        produced. Fetch and classification errors end in Failed and are
        reported to the notifier; they are not raised.

        Returns:
            The controller state once this activation has finished. If a
            newer activation started in the meantime, that one's state.
        """
        self._activation += 1
        activation = self._activation
        self._state = Loading(activation=activation)
        logger.info(f"Dashboard activation {activation} started")

        try:
            documents = await self.store.fetch_all_documents()
            partitions = partition(documents)
        except DashboardError as e:
            if self._is_stale(activation):
                logger.info(f"Discarding failure of superseded activation {activation}: {e}")
                return self._state
            logger.error(f"Dashboard activation {activation} failed: {e}")
            self._state = Failed(error=e, activation=activation)
            self.notifier.notify_error(LOAD_ERROR_TITLE, LOAD_ERROR_MESSAGE)
            return self._state

        if self._is_stale(activation):
            logger.info(f"Discarding result of superseded activation {activation}")
            return self._state

        self._state = Ready(partitions=partitions, activation=activation)
        counts = {category.value: count for category, count in partitions.counts().items()}
        logger.info(f"Dashboard activation {activation} ready: {counts}")
        return self._state

    def _is_stale(self, activation: int) -> bool:
        return activation != self._activation

    # Navigation

    def create_document(self) -> None:
        self._require_navigator().on_create_document()

    def edit_document(self, document_id: str) -> None:
        self._require_navigator().on_edit_document(document_id)

    def view_settings(self) -> None:
        self._require_navigator().on_view_settings()

    def _require_navigator(self) -> Navigator:
        if self.navigator is None:
            raise RuntimeError("Dashboard has no navigator configured")
        return self.navigator
