from app.core.enums import BattleRequestRejection


def validate_battle_request(
    monster1_id: int | None, monster2_id: int | None
) -> BattleRequestRejection | None:
    """Check the shape of a battle request.

    Only absence counts as missing, so an id of 0 is passed on to the lookup.
    Whether the ids belong to real monsters is not checked here.

    Returns:
        The rejection reason, or None if the request may proceed.
    """
    if monster1_id is None or monster2_id is None:
        return BattleRequestRejection.MISSING_ID

    if monster1_id == monster2_id:
        return BattleRequestRejection.SELF_BATTLE

    return None
