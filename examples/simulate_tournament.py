from ttcompetition.simulation import simulate_tournament
from ttcompetition.utils import configure_logging


def main():
    configure_logging(level="INFO")
    tournament = simulate_tournament(n_competitors=12, group_size=4, seed=2023)

    print("\nGroup Results:")
    for groups in tournament.groups.values():
        for group in groups:
            names = {m.id: m.display_name for m in group.members}
            print(f"\nGroup {group.label}:")
            for s in tournament.group_standings(group.id):
                print(
                    f"  {s.rank}. {names[s.competitor_id]}: {s.points} pts, "
                    f"{s.wins}W-{s.losses}L, sets {s.sets_won}-{s.sets_lost}"
                )

    bracket = tournament.bracket("Open")
    print("\nKnockout Stage:")
    for round_ in bracket.rounds:
        print(f"\n{round_.name}:")
        for match in round_.matches:
            status = "bye" if match.status.value == "bye" else match.winner_id
            print(f"  {match} -> {status}")
    print(f"\nChampion: {bracket.champion_id}")


if __name__ == "__main__":
    main()
