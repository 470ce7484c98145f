"""Tests for the usage counters: file handling and the /stats report."""

import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from models.statistics import Statistics
from repositories.statistics_repo import StatisticsRepository
from services.statistics_service import StatisticsService
from tests.helpers import write_json


class StatisticsRepositoryTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "statistics.json"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_missing_file_gives_zeroed_counters(self) -> None:
        stats = StatisticsRepository(str(self.path)).load()
        self.assertEqual(stats, Statistics())

    def test_malformed_documents_give_zeroed_counters(self) -> None:
        for payload in [
            [],
            {"start_command_count": "3", "article_views": {}},
            {"start_command_count": 3},
            {"start_command_count": True, "article_views": {}},
            {"start_command_count": 3, "article_views": []},
        ]:
            with self.subTest(payload=payload):
                write_json(self.path, payload)
                with self.assertLogs("repositories.statistics_repo", level="ERROR"):
                    stats = StatisticsRepository(str(self.path)).load()
                self.assertEqual(stats, Statistics())

    def test_non_finite_numbers_do_not_break_loading(self) -> None:
        # json.loads accepts these literals
        self.path.write_text(
            '{"start_command_count": 1, "article_views": {"a": Infinity, "b": NaN, "c": 2}}',
            encoding="utf-8",
        )
        with self.assertLogs("models.statistics", level="WARNING"):
            stats = StatisticsRepository(str(self.path)).load()
        self.assertEqual(stats, Statistics(start_command_count=1, article_views={"c": 2}))

    def test_non_finite_start_count_gives_zeroed_counters(self) -> None:
        self.path.write_text('{"start_command_count": Infinity, "article_views": {}}', encoding="utf-8")
        with self.assertLogs("repositories.statistics_repo", level="ERROR"):
            stats = StatisticsRepository(str(self.path)).load()
        self.assertEqual(stats, Statistics())

    def test_malformed_view_counts_are_dropped_with_warning(self) -> None:
        write_json(
            self.path,
            {"start_command_count": 0, "article_views": {"a": True, "b": 2.9, "c": -1, "d": "3", "e": 4}},
        )
        with self.assertLogs("models.statistics", level="WARNING") as logs:
            stats = StatisticsRepository(str(self.path)).load()
        self.assertEqual(stats.article_views, {"e": 4})
        self.assertEqual(len(logs.output), 4)

    def test_save_then_load(self) -> None:
        repo = StatisticsRepository(str(self.path))
        repo.save(Statistics(start_command_count=4, article_views={"A / B / Статья": 2}))

        raw = self.path.read_text(encoding="utf-8")
        self.assertIn("Статья", raw)
        self.assertIn('\n  "start_command_count": 4', raw)
        self.assertEqual(repo.load().article_views, {"A / B / Статья": 2})

    def test_save_leaves_no_temp_files(self) -> None:
        StatisticsRepository(str(self.path)).save(Statistics())
        self.assertEqual([p.name for p in self.path.parent.iterdir()], ["statistics.json"])


class StatisticsServiceTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "statistics.json"
        self.service = StatisticsService(StatisticsRepository(str(self.path)))

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_record_start_persists(self) -> None:
        self.assertEqual(self.service.record_start(), 1)
        self.assertEqual(self.service.record_start(), 2)
        self.assertEqual(json.loads(self.path.read_text(encoding="utf-8"))["start_command_count"], 2)

    def test_record_article_view_persists(self) -> None:
        self.service.record_article_view("S / T / A")
        self.service.record_article_view("S / T / A")
        self.service.record_article_view("S / T / B")

        stored = json.loads(self.path.read_text(encoding="utf-8"))["article_views"]
        self.assertEqual(stored, {"S / T / A": 2, "S / T / B": 1})

    def test_counters_survive_restart(self) -> None:
        self.service.record_start()
        self.service.record_article_view("X")
        reloaded = StatisticsService(StatisticsRepository(str(self.path)))
        self.assertEqual(reloaded.stats.start_command_count, 1)
        self.assertEqual(reloaded.stats.article_views, {"X": 1})

    def test_write_failure_keeps_counting_in_memory(self) -> None:
        with patch.object(self.service.repo, "save", side_effect=OSError("disk full")):
            with self.assertLogs("services.statistics_service", level="WARNING"):
                self.assertEqual(self.service.record_start(), 1)
        self.assertEqual(self.service.stats.start_command_count, 1)

    def test_report_lists_top_articles(self) -> None:
        self.service.stats = Statistics(
            start_command_count=7,
            article_views={"b": 3, "a": 3, "c": 1, "d": 5},
        )
        report = self.service.report(top=3)

        self.assertIn("/start: 7", report)
        self.assertIn("статей: 12", report)
        self.assertIn("1. d: 5\n2. a: 3\n3. b: 3", report)
        self.assertNotIn("c: 1", report)

    def test_report_without_views_has_no_ranking(self) -> None:
        self.assertNotIn("1.", self.service.report())
