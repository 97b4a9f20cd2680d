"""Tests for main module."""

from wellness_tracker.main import main


def test_main_runs_without_error(capsys) -> None:
    """Test that main function executes successfully."""
    main()
    captured = capsys.readouterr()
    assert "Wellness Tracker" in captured.out
    assert "Meals today: 0/3" in captured.out
