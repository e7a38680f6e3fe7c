import structlog

from app.db.store import LedgerStore
from app.models.base import Identity
from app.models.event import DebtSettled
from app.utils.ledger_validation import LedgerError, validate_settlement

logger = structlog.get_logger(__name__)


class SettlementService:
    @staticmethod
    def record_settlement(
        store: LedgerStore, payer: Identity, payee: Identity, amount: int
    ) -> DebtSettled:
        """
        Announce that payer settled amount with payee.

        Only a DebtSettled notification is emitted. Expenses, people and
        every net balance stay exactly as they were: settlements are
        off-ledger.
        """
        with store.write_lock:
            try:
                validate_settlement(payer, payee, amount)
            except LedgerError as exc:
                logger.warning(
                    "settlement_rejected", payer=payer, payee=payee, code=exc.code.value
                )
                raise

            event = store.events.publish(DebtSettled(payer=payer, payee=payee, amount=amount))

        logger.info("debt_settled", payer=payer, payee=payee, amount=amount)
        return event
