"""Tests for scan log formatting."""

import logging

from pr_discovery.utils import ScanContextFormatter


def make_record(**extra):
    record = logging.LogRecord(
        name="pr_discovery", level=logging.WARNING, pathname=__file__, lineno=1,
        msg="Could not read author of PR #42: author missing", args=None, exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestScanContextFormatter:
    """Tests for rendering lookup context on log lines."""

    def test_appends_lookup_fields(self):
        """Given a record with PR and reason fields, should append them as key=value."""
        formatter = ScanContextFormatter("%(levelname)s %(message)s")

        line = formatter.format(make_record(pr_number=42, reason="author missing"))

        assert line == (
            "WARNING Could not read author of PR #42: author missing "
            "[pr_number=42 reason=author missing]"
        )

    def test_plain_record_is_unchanged(self):
        """Given a record without lookup fields, should render only the message."""
        formatter = ScanContextFormatter("%(message)s")

        assert formatter.format(make_record()) == "Could not read author of PR #42: author missing"
