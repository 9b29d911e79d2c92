"""
Basic usage example for the Elo rating engine.
"""

from elo_engine import DRAW, LOSS, WIN, RatingEngine, update_one_vs_one


def main():
    # Module-level functions use the shared default engine (K = 32)
    home, opponent = update_one_vs_one(1000, 1000, WIN)
    print(f"Duel: home {home.old_rating} -> {home.new_rating:.1f}, "
          f"opponent {opponent.old_rating} -> {opponent.new_rating:.1f}")

    # A dedicated engine with its own K-factor
    engine = RatingEngine(k_factor=24)

    draw = engine.update_one_vs_one(1613, 1609, DRAW)
    print(f"Draw: {draw.home.change:+.2f} / {draw.opponent.change:+.2f}")

    # Team match: every player is rated against the other team's mean
    team = engine.update_many_vs_many([1500, 1320, 1410], [1450, 1480], LOSS)
    print("Home team:", [round(r.new_rating, 1) for r in team.home])
    print("Opponent team:", [round(r.new_rating, 1) for r in team.opponent])

    # Free-for-all: ratings ordered by finishing position, winner first
    ratings = [1380, 1520, 1450, 1410]
    for position, result in enumerate(engine.update_free_for_all(ratings), start=1):
        print(f"#{position}: {result.old_rating} -> {result.new_rating:.1f} ({result.change:+.1f})")

    # Shared finishing positions count as draws
    tied = engine.update_free_for_all([1400, 1400, 1400], ranks=[1, 2, 2])
    print("With a tie for second:", [r.as_dict() for r in tied])


if __name__ == "__main__":
    main()
