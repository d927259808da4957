#!/usr/bin/env python3
"""
Report on inventory health: expired, expiring soon and low-stock items,
plus the dashboard counts.
"""

import argparse
import logging

import pandas as pd

from kitchen_utils.config import config
from kitchen_utils.database import (
    get_connection,
    get_dashboard_counts,
    load_inventory,
    load_recipes,
    validate_unit_coverage,
)
from kitchen_utils.pantry import (
    dashboard_stats,
    filter_inventory,
    flag_inventory,
    sort_inventory,
)
from kitchen_utils.pantry.inventory import SORT_FIELDS

logging.basicConfig(
    level=config.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Main function to print the inventory report."""
    parser = argparse.ArgumentParser(description="Report expired, expiring and low-stock items")
    parser.add_argument(
        "--db-path",
        type=str,
        default=config.KITCHEN_DB_PATH,
        help="Path to the database file",
    )
    parser.add_argument(
        "--today",
        type=str,
        default=None,
        help="Reference date (YYYY-MM-DD), defaults to today",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=config.EXPIRING_SOON_DAYS,
        help="Flag items expiring within this many days",
    )
    parser.add_argument(
        "--filter",
        type=str,
        default="",
        help="Only report items whose name, category or location contains this text",
    )
    parser.add_argument(
        "--sort-by",
        type=str,
        default="ingredient_name",
        choices=sorted(SORT_FIELDS),
        help="Column to order the reported items by",
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        help="Sort in descending order",
    )
    args = parser.parse_args()
    config.validate()

    conn = get_connection(args.db_path)
    try:
        counts = get_dashboard_counts(conn)
        recipes = load_recipes(conn)
        inventory = filter_inventory(load_inventory(conn), args.filter)
        inventory = sort_inventory(inventory, args.sort_by, not args.descending)
    finally:
        conn.close()
    validate_unit_coverage(args.db_path)

    flags = flag_inventory(inventory, args.today, args.days)
    flags_df = pd.DataFrame([vars(f) for f in flags])
    stats = dashboard_stats(counts["total_users"], recipes, inventory, args.today)

    print("Dashboard:")
    print(f"  - Users: {stats.total_users}")
    print(f"  - Recipes: {stats.recipe_count}")
    print(f"  - Inventory items: {stats.inventory_count}")
    print(f"  - Inventory value: {stats.inventory_value:.2f}")

    if flags_df.empty:
        print("No inventory items found.")
        return

    for column, label in (
        ("expired", "Expired"),
        ("expiring_soon", f"Expiring within {args.days} days"),
        ("low_stock", "Low stock"),
    ):
        flagged = flags_df[flags_df[column]]
        print(f"{label} ({len(flagged)}):")
        for _, row in flagged.iterrows():
            print(f"  - {row['inventory_id']}  {row['ingredient_name']}")


if __name__ == "__main__":
    main()
