# evaluation/board_stats.py

import argparse
import csv
import logging

import numpy as np

from sweeper.board import BoardGenerator
from sweeper.levels import Level, load_levels
from sweeper.regions import RegionAnalyzer

logger = logging.getLogger(__name__)


def survey(level, boards: int, seed: int = None, levels: dict = None):
    """
    Generate ``boards`` random boards for ``level`` and analyze each one.
    Returns a list of {"bbbv", "regions"} rows.
    """
    level = Level.parse(level)
    config = (levels or load_levels())[level]
    generator = BoardGenerator(seed=seed)
    analyzer = RegionAnalyzer()

    rows = []
    for _ in range(boards):
        grid = generator.generate(config.size, config.mines)
        analysis = analyzer.analyze(grid)
        rows.append({"bbbv": analysis.bbbv, "regions": analysis.region_count})
    logger.info("Surveyed %d %s boards", boards, level.value)
    return rows


def summarize(rows):
    if not rows:
        return {"boards": 0, "mean": 0.0, "std": 0.0, "min": 0, "max": 0, "mean_regions": 0.0}
    bbbv = np.array([row["bbbv"] for row in rows])
    regions = np.array([row["regions"] for row in rows])
    return {
        "boards": len(rows),
        "mean": float(bbbv.mean()),
        "std": float(bbbv.std()),
        "min": int(bbbv.min()),
        "max": int(bbbv.max()),
        "mean_regions": float(regions.mean()),
    }


def display_summary(summaries):
    print("\nBoard difficulty (3BV)\n")
    header = f"{'Level':<10} {'Boards':<8} {'Mean 3BV':<10} {'Std':<8} {'Min':<6} {'Max':<6} {'Regions'}"
    print(header)
    print("-" * len(header))
    for level, stats in summaries.items():
        print(
            f"{level:<10} {stats['boards']:<8} {stats['mean']:<10.1f} {stats['std']:<8.2f} "
            f"{stats['min']:<6} {stats['max']:<6} {stats['mean_regions']:.1f}"
        )


def export_summary_csv(summaries, path="board_stats.csv"):
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["Level", "Boards", "Mean 3BV", "Std 3BV", "Min 3BV", "Max 3BV", "Mean Regions"])
        for level, stats in summaries.items():
            writer.writerow([
                level, stats["boards"], f"{stats['mean']:.1f}", f"{stats['std']:.2f}",
                stats["min"], stats["max"], f"{stats['mean_regions']:.1f}"
            ])


def export_summary_markdown(summaries, path="board_stats.md"):
    with open(path, "w") as f:
        f.write("## Board difficulty (3BV)\n\n")
        f.write("| Level | Boards | Mean 3BV | Std 3BV | Min 3BV | Max 3BV | Mean Regions |\n")
        f.write("|-------|--------|----------|---------|---------|---------|--------------|\n")
        for level, stats in summaries.items():
            f.write(
                f"| {level} | {stats['boards']} | {stats['mean']:.1f} | {stats['std']:.2f} | "
                f"{stats['min']} | {stats['max']} | {stats['mean_regions']:.1f} |\n"
            )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Survey 3BV difficulty of random boards")
    parser.add_argument("--levels", nargs="+", default=[level.value for level in Level],
                        help="levels to survey")
    parser.add_argument("--boards", type=int, default=200, help="boards generated per level")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--csv", default=None, help="write the summary as CSV to this path")
    parser.add_argument("--markdown", default=None, help="write the summary as Markdown to this path")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    summaries = {}
    for name in args.levels:
        level = Level.parse(name)
        summaries[level.value] = summarize(survey(level, args.boards, seed=args.seed))

    display_summary(summaries)
    if args.csv:
        export_summary_csv(summaries, args.csv)
    if args.markdown:
        export_summary_markdown(summaries, args.markdown)
    return summaries


if __name__ == "__main__":
    main()
