"""Unit tests for data quality metrics."""

from __future__ import annotations

import unittest

from backend.core.formgen.config import InferenceConfig
from backend.core.formgen.csv_loader import CsvTokenizer
from backend.core.formgen.detector import TypeDetector
from backend.core.formgen.profiler import ColumnProfiler
from backend.core.formgen.reporting import QualityAnalyzer


class QualityAnalyzerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.analyzer = QualityAnalyzer()

    def analyze(self, text: str):
        table = CsvTokenizer.tokenize(text)
        profiles = ColumnProfiler().profile_table(table)
        detections = TypeDetector().detect_all(profiles)
        return self.analyzer.analyze(table, detections, profiles)

    def test_completeness_counts_empty_cells(self) -> None:
        quality = self.analyze("a,b\n1,\n2,\n")

        self.assertEqual(quality.total_cells, 4)
        self.assertEqual(quality.null_cells, 2)
        self.assertAlmostEqual(quality.completeness, 0.5)

    def test_consistency_and_validity_follow_confidence(self) -> None:
        quality = self.analyze("name,age\nAlice,30\nBob,25\n")

        self.assertAlmostEqual(quality.completeness, 1.0)
        self.assertAlmostEqual(quality.consistency, 0.5)
        self.assertAlmostEqual(quality.validity, 0.75)

    def test_uniqueness_is_mean_over_columns(self) -> None:
        quality = self.analyze("a,b\nx,1\nx,2\n")

        self.assertAlmostEqual(quality.columns[0].uniqueness, 0.5)
        self.assertAlmostEqual(quality.columns[1].uniqueness, 1.0)
        self.assertAlmostEqual(quality.uniqueness, 0.75)

    def test_per_column_figures(self) -> None:
        quality = self.analyze("name,age\nAlice,30\n,25\n")

        name = quality.columns[0]
        self.assertEqual(name.column_name, "name")
        self.assertAlmostEqual(name.completeness, 0.5)
        self.assertEqual(quality.columns[1].confidence, 1.0)

    def test_header_only_table_has_zero_metrics(self) -> None:
        quality = self.analyze("a,b\n")

        self.assertEqual(quality.total_cells, 0)
        self.assertEqual(quality.completeness, 0.0)
        self.assertEqual(quality.uniqueness, 0.0)
        self.assertEqual(quality.validity, 0.0)

    def test_table_alone_is_profiled_and_detected(self) -> None:
        table = CsvTokenizer.tokenize("age\n1\n2\n3\n4\n")

        quality = self.analyzer.analyze(table)

        self.assertAlmostEqual(quality.consistency, 1.0)
        self.assertAlmostEqual(quality.validity, 1.0)
        self.assertAlmostEqual(quality.completeness, 1.0)
        self.assertAlmostEqual(quality.uniqueness, 1.0)
        self.assertEqual(quality.columns[0].confidence, 1.0)

    def test_table_alone_matches_explicit_detections(self) -> None:
        text = "name,age\nAlice,30\nBob,25\n"

        implicit = self.analyzer.analyze(CsvTokenizer.tokenize(text))
        explicit = self.analyze(text)

        self.assertEqual(implicit, explicit)

    def test_analyzer_uses_its_own_thresholds(self) -> None:
        table = CsvTokenizer.tokenize("name,age\nAlice,30\nBob,25\n")

        quality = QualityAnalyzer(InferenceConfig(consistency_threshold=0.4)).analyze(table)

        self.assertAlmostEqual(quality.consistency, 1.0)

    def test_metrics_serialize(self) -> None:
        payload = self.analyze("a\n1\n").to_dict()

        self.assertEqual(payload["total_cells"], 1)
        self.assertEqual(payload["columns"][0]["column_name"], "a")


if __name__ == "__main__":
    unittest.main()
