import structlog

from ..store import EntityStore, synchronized
from ..utils import ZERO, HUNDRED, round_pct

log = structlog.get_logger()


@synchronized
def normalize_weights(store: EntityStore, portfolio_id: str) -> None:
    """Rebase every holding weight of a portfolio on its total market value.

    Weights are left at 0 when the portfolio has no market value.
    """
    holdings = store.where("holding", portfolio_id=portfolio_id)
    total = sum((h.market_value for h in holdings), ZERO)
    for holding in holdings:
        weight = round_pct(holding.market_value / total * HUNDRED) if total > 0 else ZERO
        store.replace("holding", holding.model_copy(update={"weight": weight}))
    log.debug("weights_normalized", portfolio_id=portfolio_id, holdings=len(holdings), total_market_value=str(total))


def normalize_many(store: EntityStore, portfolio_ids) -> None:
    for portfolio_id in dict.fromkeys(portfolio_ids):
        normalize_weights(store, portfolio_id)
