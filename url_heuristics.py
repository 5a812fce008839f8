import logging
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

SUSPICIOUS_WORDS = ["free", "login", "verify", "account", "update", "secure", "bank"]

_RE_SUSPICIOUS = re.compile("|".join(SUSPICIOUS_WORDS), re.I)
_RE_IP = re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}")

DANGEROUS_THRESHOLD = 50
SUSPICIOUS_THRESHOLD = 20


class Status(Enum):
    SAFE = "safe"
    SUSPICIOUS = "suspicious"
    DANGEROUS = "dangerous"


@dataclass(frozen=True)
class AnalysisResult:
    status: Status
    reasons: tuple
    score: int

    def to_dict(self):
        return {
            "status": self.status.value,
            "reasons": list(self.reasons),
            "score": self.score,
        }


# ---------------------------
# Feature extraction function
# ---------------------------
def featurize(url: str):
    """Plain string tests; the input is never parsed as a URL."""
    return {
        "no_https": not url.startswith("https://"),
        "suspicious_words": bool(_RE_SUSPICIOUS.search(url)),
        "many_subdomains": url.count(".") > 2,
        "has_ip": bool(_RE_IP.search(url)),
    }


# (feature, weight, reason) in reporting order
CHECKS = [
    ("no_https", 30, "Missing SSL/TLS encryption (no HTTPS)"),
    ("suspicious_words", 20, "Contains suspicious keywords commonly used in phishing"),
    ("many_subdomains", 15, "Contains an unusual number of subdomains"),
    ("has_ip", 35, "Uses IP address instead of domain name"),
]


def status_for_score(score: int) -> Status:
    if score >= DANGEROUS_THRESHOLD:
        return Status.DANGEROUS
    if score >= SUSPICIOUS_THRESHOLD:
        return Status.SUSPICIOUS
    return Status.SAFE


# ---------------------------
# Scoring
# ---------------------------
def analyze(url: str) -> AnalysisResult:
    """
    Score a URL string against the phishing heuristics.

    Every string is a legal input, including the empty string. The score is
    the sum of the weights of the checks that fired, and the reasons list
    those checks in table order.
    """
    feats = featurize(url or "")

    reasons = []
    score = 0
    for name, weight, reason in CHECKS:
        if feats[name]:
            reasons.append(reason)
            score += weight

    result = AnalysisResult(status_for_score(score), tuple(reasons), score)
    logger.debug("Analyzed %r: score=%d status=%s", url, score, result.status.value)
    return result
