from app.engine.models import BattleOutcome, Combatant, MonsterStats, Turn

# Every hit lands for at least this much, so the fight always ends
MIN_DAMAGE = 1


def compute_damage(attacker: MonsterStats, defender: MonsterStats) -> int:
    return max(MIN_DAMAGE, attacker.attack - defender.defense)


def decide_turn_order(first: Combatant, second: Combatant) -> tuple[Combatant, Combatant]:
    """Return (attacker, defender) for the opening turn.

    Faster monster goes first, then the one with higher attack. A full tie
    keeps the order the monsters were given in.
    """
    a, b = first.stats, second.stats
    if b.speed > a.speed or (b.speed == a.speed and b.attack > a.attack):
        return second, first
    return first, second


def simulate_battle(monster1: MonsterStats, monster2: MonsterStats) -> BattleOutcome:
    """Fight two monsters to the end and log every exchange.

    The result depends only on the two stat records. Neither input is
    modified; the winner in the outcome is the caller's original record.
    """
    fighter1 = Combatant.from_stats(monster1)
    fighter2 = Combatant.from_stats(monster2)

    attacker, defender = decide_turn_order(fighter1, fighter2)
    turns: list[Turn] = []

    while fighter1.is_alive and fighter2.is_alive:
        damage = compute_damage(attacker.stats, defender.stats)
        remaining_hp = defender.take_hit(damage)

        turns.append(
            Turn(
                attacker=attacker.stats,
                defender=defender.stats,
                damage=damage,
                remaining_hp=remaining_hp,
            )
        )

        if not defender.is_alive:
            break

        attacker, defender = defender, attacker

    winner = monster1 if fighter1.is_alive else monster2
    return BattleOutcome(winner=winner, monster1=monster1, monster2=monster2, turns=tuple(turns))
