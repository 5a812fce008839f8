"""
Tests for the url_check command-line front end.
"""

from __future__ import annotations

import json
import logging

from url_check import USAGE, main


def test_analyze_prints_report(capsys):
    assert main(["analyze", "http://192.168.1.1/login"]) == 0
    out = capsys.readouterr().out
    assert "Status: DANGEROUS" in out
    assert "Risk Score: 100/100" in out
    assert "Uses IP address instead of domain name" in out


def test_analyze_json(capsys):
    assert main(["analyze", "https://example.com", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == {"status": "safe", "reasons": [], "score": 0}


def test_feedback_command(capsys, caplog):
    with caplog.at_level(logging.INFO, logger="feedback"):
        assert main(["feedback", "https://example.com", "yes"]) == 0
    assert "Feedback recorded for https://example.com" in capsys.readouterr().out
    assert "Analysis correct" in caplog.text


def test_bad_usage(capsys):
    assert main([]) == 1
    assert main(["analyze"]) == 1
    assert main(["feedback", "https://example.com", "maybe"]) == 1
    assert main(["block", "https://example.com"]) == 1
    assert USAGE in capsys.readouterr().out
    assert "analyze <url> [--json]" in USAGE
