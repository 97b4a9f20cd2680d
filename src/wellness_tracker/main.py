"""Console summary of an empty day."""

from wellness_tracker.containers import build_container


def main() -> None:
    """Print the starting dashboard for a new day."""
    container = build_container()
    service = container.session_service
    snapshot = service.snapshot(service.new_session())
    daily = snapshot.daily_progress
    print("Wellness Tracker")
    print(f"Meals today: {daily.meals.current}/{daily.meals.target}")
    print(f"Exercise time: {daily.exercise_minutes.current}min")
    print(
        "PCOS-friendly: "
        f"{daily.pcos_friendly_meals.current}/{daily.pcos_friendly_meals.target}"
    )
    for status in snapshot.achievements:
        mark = "x" if status.earned else " "
        print(f"[{mark}] {status.icon} {status.title}")


if __name__ == "__main__":
    main()
