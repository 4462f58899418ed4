"""CLI interface for historical weather outlooks."""

import argparse
import logging
import sys
from datetime import datetime

from ...domain.entities.location import Location
from ...domain.entities.outlook import DayOutlook
from ...domain.exceptions import WeatherOutlookError
from ..wiring import build_service, configure_logging

logger = logging.getLogger(__name__)

TIER_MARKERS = {"ideal": "+", "okay": "~", "avoid": "-"}


def _parse_date(value: str):
    for fmt in ("%Y-%m-%d", "%Y%m%d"):
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD")


def print_outlook(outlook: DayOutlook) -> None:
    """Print an outlook to stdout."""
    print("\n" + "=" * 60)
    print(" HISTORICAL WEATHER OUTLOOK ")
    print("=" * 60)
    print(f" Location: {outlook.location} | {outlook.target_date.strftime('%B %d')}")
    print(f" Based on: {outlook.sample.size} years ({', '.join(outlook.sample.dates)})")
    print(f" {outlook.summary.temperature_band.label}: {outlook.summary.text}")
    print("-" * 60)

    for estimate in outlook.estimates:
        print(f"  {estimate.label:<6} {estimate.probability:>3}%")

    print("\nActivities:")
    for activity in outlook.activities:
        marker = TIER_MARKERS[activity.recommendation.value]
        print(f"  [{marker}] {activity.name:<16} {activity.recommendation.describe()}")

    print("\nWhat to wear:")
    for item in outlook.clothing:
        tag = "essential" if item.essential else "optional"
        print(f"  • {item.name} ({tag}) - {item.description}")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(description="Will It Rain - historical weather outlook")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === outlook: estimates + activities + clothing for a calendar day ===
    outlook_parser = subparsers.add_parser(
        "outlook", help="Estimate conditions for a location and calendar day"
    )
    outlook_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    outlook_parser.add_argument("--lon", type=float, required=True, help="Longitude")
    outlook_parser.add_argument(
        "--date", type=_parse_date, required=True, help="Day of interest (YYYY-MM-DD)"
    )
    outlook_parser.add_argument("--location", type=str, default=None, help="Display name")
    outlook_parser.add_argument(
        "--export", type=str, default=None, metavar="DIR", help="Write the CSV summary to DIR"
    )
    outlook_parser.add_argument("--save", action="store_true", help="Keep as a saved query")

    # === current: live conditions ===
    current_parser = subparsers.add_parser("current", help="Show current conditions")
    current_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    current_parser.add_argument("--lon", type=float, required=True, help="Longitude")

    # === saved: list/delete saved queries ===
    saved_parser = subparsers.add_parser("saved", help="Manage saved queries")
    saved_subparsers = saved_parser.add_subparsers(dest="saved_command", required=True)
    saved_subparsers.add_parser("list", help="List saved queries")
    delete_parser = saved_subparsers.add_parser("delete", help="Delete a saved query")
    delete_parser.add_argument("query_id", type=str, help="Saved query id")

    args = parser.parse_args()
    configure_logging()

    try:
        service = build_service()
    except Exception as e:
        logger.error(f"Failed to initialize service: {e}")
        sys.exit(1)

    # === Command: outlook ===
    if args.command == "outlook":
        location = Location(latitude=args.lat, longitude=args.lon, name=args.location)
        try:
            outlook = service.evaluate(location, args.date)
            print_outlook(outlook)

            if args.export:
                path = service.write_csv(outlook, args.export)
                print(f"\nCSV summary saved to: {path}")
            if args.save:
                query = service.save_query(outlook)
                print(f"Saved query: {query.id}")
        except WeatherOutlookError as e:
            logger.error(f"Outlook failed: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error(f"Outlook failed: {e}", exc_info=True)
            sys.exit(1)

    # === Command: current ===
    elif args.command == "current":
        try:
            conditions = service.current_conditions(Location(args.lat, args.lon))
        except Exception as e:
            logger.error(f"Current conditions failed: {e}")
            sys.exit(1)

        print("\n" + "=" * 50)
        print(" CURRENT CONDITIONS ")
        print("=" * 50)
        print(f" Condition:     {conditions.condition}")
        print(f" Temperature:   {conditions.temperature}°F")
        print(f" Wind:          {conditions.wind_speed}")
        print(f" Precipitation: {conditions.precipitation}")
        print(f" Humidity:      {conditions.humidity}%")
        print("=" * 50)

    # === Command: saved ===
    elif args.command == "saved":
        if args.saved_command == "list":
            queries = service.list_saved_queries()
            if not queries:
                print("No saved queries.")
            for q in queries:
                temperature = f"{q.temperature}°F" if q.temperature is not None else "-"
                print(f"  {q.id}  {q.date}  {q.location or f'{q.lat}, {q.lon}'}  {temperature}")
        elif args.saved_command == "delete":
            if not service.delete_saved_query(args.query_id):
                logger.error(f"Saved query not found: {args.query_id}")
                sys.exit(1)
            print(f"Deleted saved query {args.query_id}")


if __name__ == "__main__":
    main()
