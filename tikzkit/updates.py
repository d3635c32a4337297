"""Checking a published version string against the running release."""

from __future__ import annotations

import functools
import re
import urllib.request
from dataclasses import dataclass

CURRENT_VERSION = "2.1.6"

# Releases without a release-candidate suffix count as later than any candidate.
_FINAL_RC = 1000
_MAX_REPLY_BYTES = 200

_VERSION_PATTERN = re.compile(r"^[1-9]+(\.[0-9]+)*(-[rR][cC]([0-9]+))?$")


class InvalidVersionError(ValueError):
    """Raised when a text is not a well-formed release version."""


def _simplify(text: str) -> str:
    return " ".join(text.split())


@functools.total_ordering
@dataclass(frozen=True)
class ReleaseVersion:
    """A dotted release number with an optional release-candidate number."""

    segments: tuple[int, ...]
    rc: int | None = None

    @classmethod
    def parse(cls, text: str) -> "ReleaseVersion":
        """Parse a version such as ``2.1.6`` or ``2.1.7-rc2``."""
        match = _VERSION_PATTERN.match(text)
        if match is None:
            raise InvalidVersionError(f"not a valid version: {text!r}")
        numeric = text.split("-", 1)[0]
        segments = [int(part) for part in numeric.split(".")]
        while segments and segments[-1] == 0:
            segments.pop()
        rc = int(match.group(3)) if match.group(3) else None
        return cls(tuple(segments), rc)

    def segment(self, index: int) -> int:
        """The number at ``index``, or 0 where the version has no such segment."""
        return self.segments[index] if index < len(self.segments) else 0

    @property
    def _key(self) -> tuple[tuple[int, ...], int]:
        return (self.segments, _FINAL_RC if self.rc is None else self.rc)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ReleaseVersion):
            return NotImplemented
        return self._key < other._key

    def __str__(self) -> str:
        text = f"{self.segment(0)}.{self.segment(1)}.{self.segment(2)}"
        if self.rc is not None and self.rc != _FINAL_RC:
            text += f"-rc{self.rc}"
        return text


def newer_release(current: str, response: str | bytes) -> str | None:
    """Return the advertised version in standard form if it is newer than ``current``.

    ``response`` is the raw reply of the version service; only its first
    200 bytes are considered. Raises InvalidVersionError for a malformed reply.
    """
    if isinstance(response, bytes):
        response = response[:_MAX_REPLY_BYTES].decode("utf-8", errors="replace")
    latest = ReleaseVersion.parse(_simplify(response))
    if latest > ReleaseVersion.parse(current):
        return str(latest)
    return None


def fetch_latest_version(url: str, timeout: float) -> str:
    """Download the published version string from ``url``."""
    with urllib.request.urlopen(url, timeout=timeout) as reply:
        data = reply.read(_MAX_REPLY_BYTES)
    return _simplify(data.decode("utf-8", errors="replace"))