#!/usr/bin/env python3
import json
import logging
import os
import sys

from feedback import record_feedback
from url_heuristics import analyze

USAGE = "Usage: analyze <url> [--json] | feedback <url> yes|no"


def print_analysis(url, as_json=False):
    result = analyze(url)
    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
        return
    print(f"URL: {url}")
    print(f"Status: {result.status.value.upper()}")
    print(f"Risk Score: {result.score}/100")
    for r in result.reasons:
        print(f"  - {r}")


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=os.environ.get("PHISHCHECK_LOG_LEVEL", "INFO").upper())

    if len(args) < 2:
        print(USAGE)
        return 1

    cmd, url = args[0], args[1]
    if cmd == "analyze" and args[2:] in ([], ["--json"]):
        print_analysis(url, as_json=bool(args[2:]))
        return 0
    if cmd == "feedback" and len(args) == 3 and args[2] in ("yes", "no"):
        record_feedback(url, args[2] == "yes")
        print("Feedback recorded for", url)
        return 0

    print(USAGE)
    return 1


if __name__ == "__main__":
    sys.exit(main())
