# tests/test_board_stats.py

import os
import tempfile
import unittest

from evaluation.board_stats import export_summary_csv, export_summary_markdown, main, summarize, survey


class TestBoardStats(unittest.TestCase):

    def test_survey_and_summary(self):
        rows = survey("easy", 5, seed=1)
        self.assertEqual(len(rows), 5)
        for row in rows:
            self.assertGreater(row["bbbv"], 0)
            self.assertLessEqual(row["bbbv"], 12 * 12 - 12)

        stats = summarize(rows)
        self.assertEqual(stats["boards"], 5)
        self.assertLessEqual(stats["min"], stats["mean"])
        self.assertLessEqual(stats["mean"], stats["max"])

    def test_survey_is_reproducible(self):
        self.assertEqual(survey("hard", 3, seed=9), survey("hard", 3, seed=9))

    def test_empty_summary(self):
        self.assertEqual(summarize([])["boards"], 0)

    def test_exports(self):
        summaries = {"easy": summarize(survey("easy", 3, seed=2))}
        with tempfile.TemporaryDirectory() as tmp:
            csv_path = os.path.join(tmp, "stats.csv")
            md_path = os.path.join(tmp, "stats.md")
            export_summary_csv(summaries, csv_path)
            export_summary_markdown(summaries, md_path)
            with open(csv_path) as f:
                self.assertTrue(f.readline().startswith("Level,Boards"))
            with open(md_path) as f:
                self.assertIn("| easy | 3 |", f.read())

    def test_cli(self):
        summaries = main(["--levels", "easy", "beast", "--boards", "2", "--seed", "4"])
        self.assertEqual(set(summaries), {"easy", "beast"})


if __name__ == "__main__":
    unittest.main()
