from topmovers.models.movers import MoversSnapshot


def shape_snapshot(snapshot: MoversSnapshot, limit: int) -> MoversSnapshot:
    """
    Keep the first `limit` entries of each movers list.

    Order is whatever the provider returned; shorter lists come back as they are.
    Returns a new snapshot and leaves the input untouched.
    """
    return MoversSnapshot(
        top_gainers=snapshot.top_gainers[:limit],
        top_losers=snapshot.top_losers[:limit],
        most_actively_traded=snapshot.most_actively_traded[:limit],
        last_updated=snapshot.last_updated,
    )
