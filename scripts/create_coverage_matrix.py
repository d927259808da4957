#!/usr/bin/env python3
"""
Create a recipe-ingredient coverage matrix against the current inventory.
Rows are recipes, columns are ingredient lines; values are match scores
or have/missing booleans. Outputs to csv or parquet.
"""

import argparse
import datetime
import logging
import pathlib

import pandas as pd
from tqdm.auto import tqdm

from kitchen_utils.config import config
from kitchen_utils.database import get_connection, get_coverage_frame
from kitchen_utils.pantry import coverage_percent

logging.basicConfig(
    level=config.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_coverage_matrix(
    coverage_df: pd.DataFrame, matrix_type: str = "score"
) -> pd.DataFrame:
    """Pivot per-line coverage rows into a recipe x ingredient-line matrix.

    Args:
        coverage_df: DataFrame from get_coverage_frame
        matrix_type: "score" for match scores, "boolean" for have/missing

    Returns:
        DataFrame indexed by (recipe_id, title) with one column per
        ingredient line, plus a "percent" column.
    """
    if coverage_df.empty:
        return pd.DataFrame()

    value_column = "have" if matrix_type == "boolean" else "score"
    matrix_df = coverage_df.pivot_table(
        index=["recipe_id", "title"],
        columns="ingredient_line",
        values=value_column,
        aggfunc="max",
    )
    if matrix_type == "boolean":
        matrix_df = matrix_df.fillna(False).astype(bool)

    percents = {}
    for (recipe_id, title), group in tqdm(
        coverage_df.groupby(["recipe_id", "title"]), desc="Computing coverage"
    ):
        have = int(group["have"].sum())
        percents[(recipe_id, title)] = coverage_percent(have, len(group))
    matrix_df["percent"] = pd.Series(percents)

    return matrix_df.sort_values("percent", ascending=False, kind="stable")


def main():
    """Main function to create the coverage matrix."""
    parser = argparse.ArgumentParser(
        description="Create a recipe x ingredient-line coverage matrix"
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default=config.KITCHEN_DB_PATH,
        help="Path to the database file",
    )
    parser.add_argument(
        "--matrix-type",
        type=str,
        choices=["score", "boolean"],
        default="score",
        help="Type of matrix to create: score (0/0.8/1) or boolean (have/missing)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["csv", "parquet"],
        default="csv",
        help="Output file format",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="data",
        help="Output directory for matrix files",
    )
    args = parser.parse_args()

    conn = get_connection(args.db_path)
    try:
        coverage_df = get_coverage_frame(conn)
    finally:
        conn.close()

    if coverage_df.empty:
        logger.warning("No recipe ingredient data found. Exiting.")
        return

    matrix_df = create_coverage_matrix(coverage_df, matrix_type=args.matrix_type)

    output_dir = pathlib.Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    output_file = output_dir / f"coverage_matrix_{args.matrix_type}_{timestamp}.{args.format}"
    if args.format == "parquet":
        matrix_df.to_parquet(output_file, index=True)
    else:
        matrix_df.to_csv(output_file, index=True)

    print("Successfully created coverage matrix:")
    print(f"  - File: {output_file}")
    print(f"  - Type: {args.matrix_type}")
    print(f"  - Recipes: {len(matrix_df)}")
    print(f"  - Ingredient columns: {len(matrix_df.columns) - 1}")


if __name__ == "__main__":
    main()
