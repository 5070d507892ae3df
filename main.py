"""Simple entrypoint to plan outfits from the local wardrobe."""

import argparse
import json

from closet_app.app import ClosetPlannerApp


def main() -> None:
    parser = argparse.ArgumentParser(description="Closet planner")
    parser.add_argument("command", choices=["daily", "week", "analytics"], nargs="?", default="daily")
    args = parser.parse_args()

    app = ClosetPlannerApp()
    if args.command == "week":
        result = app.planner.generate_weekly_outfits()
    elif args.command == "analytics":
        result = app.planner.wardrobe_analytics()
    else:
        result = app.planner.generate_daily_outfit()
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
