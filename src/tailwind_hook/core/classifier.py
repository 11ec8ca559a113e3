"""Failure detection over the Tailwind CLI's stderr stream.

The CLI offers no reliable exit status and no machine-readable success
marker, and it writes routine informational messages (``Done in
120ms``) to stderr.  Its errors, however, always embed a JSON object.
The detector therefore treats any ``}`` in stderr as a failure and
everything else, including empty output, as success.

Known gap: an informational message that happens to contain ``}`` is
reported as a failure, and an error message without one is silently
accepted.  The heuristic is kept as-is for compatibility with the
CLI's observed behaviour; tightening it needs a confirmed output
contract first.
"""

from __future__ import annotations

from tailwind_hook.core.models import Classification
from tailwind_hook.exceptions import CliReportedError

FAILURE_MARKER = "}"


def classify(stderr_text: str) -> Classification:
    """Classify captured stderr as success or failure."""
    if FAILURE_MARKER in stderr_text:
        return Classification.failure(stderr_text)
    return Classification.success()


def raise_for_classification(classification: Classification) -> None:
    """Raise :class:`CliReportedError` when *classification* is a failure.

    The raw stderr text becomes the exception message unmodified.
    """
    if classification.succeeded:
        return
    raise CliReportedError(classification.message or "")
