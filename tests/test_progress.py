"""Tests for progress reporting."""

from unittest.mock import patch

from treesearch.search.progress import ProgressReporter, SearchStats, _format_duration


class TestProgressReporter:
    """Tests for ProgressReporter."""

    def test_reports_after_interval(self, capsys):
        reporter = ProgressReporter(interval=2)
        stats = SearchStats(directories_scanned=2, matches=1)

        reporter.report_if_needed(stats, "/srv/data")

        err = capsys.readouterr().err
        assert "[2 dirs, 1 matches] Searching: /srv/data" in err

    def test_quiet_before_interval(self, capsys):
        reporter = ProgressReporter(interval=10)

        reporter.report_if_needed(SearchStats(directories_scanned=9), "/srv")

        assert capsys.readouterr().err == ""

    def test_counts_from_last_report(self, capsys):
        reporter = ProgressReporter(interval=5)
        reporter.report_if_needed(SearchStats(directories_scanned=5), "/a")
        capsys.readouterr()

        reporter.report_if_needed(SearchStats(directories_scanned=8), "/b")

        assert capsys.readouterr().err == ""

    def test_completion_summary(self, capsys):
        reporter = ProgressReporter()
        stats = SearchStats(directories_scanned=1234, entries_seen=5000, matches=3)

        reporter.report_completion(stats)

        err = capsys.readouterr().err
        assert "3 matches in 1,234 directories" in err
        assert "Entries examined: 5,000" in err
        assert "skipped" not in err

    def test_completion_mentions_skipped(self, capsys):
        reporter = ProgressReporter()

        reporter.report_completion(SearchStats(skipped_directories=2))

        assert "Directories skipped: 2" in capsys.readouterr().err


class TestFormatDuration:
    """Tests for _format_duration."""

    def test_seconds(self):
        assert _format_duration(42.7) == "42s"

    def test_minutes(self):
        assert _format_duration(125) == "2m 5s"

    def test_hours(self):
        assert _format_duration(3725) == "1h 2m 5s"


class TestSearchStats:
    """Tests for SearchStats."""

    def test_elapsed_stops_at_finish(self):
        stats = SearchStats(start_time=100.0)

        with patch("treesearch.search.progress.time.time", return_value=105.0):
            stats.finish()
        with patch("treesearch.search.progress.time.time", return_value=200.0):
            elapsed = stats.elapsed_seconds

        assert elapsed == 5.0

    def test_elapsed_live_before_finish(self):
        stats = SearchStats(start_time=100.0)

        with patch("treesearch.search.progress.time.time", return_value=130.0):
            assert stats.elapsed_seconds == 30.0


class TestReset:
    """Tests for ProgressReporter.reset."""

    def test_reports_again_after_reset(self, capsys):
        reporter = ProgressReporter(interval=2)
        reporter.report_if_needed(SearchStats(directories_scanned=4), "/first")
        capsys.readouterr()

        reporter.reset()
        reporter.report_if_needed(SearchStats(directories_scanned=2), "/second")

        assert "Searching: /second" in capsys.readouterr().err
