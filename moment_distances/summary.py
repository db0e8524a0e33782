"""Plain text summaries explaining how a distance was calculated.

The summary walks the same metric tree as `distance`, one indented block per
nesting level, with real numbers rounded to a few significant digits:

    total: 1.7
      from s:
        ‹1.0 ↔ 2.0: 1.0›
      from A:
        weighted: 0.7
          elementwise mean distance: 1.0
            [0,0]  ‹1.0 ↔ 0.0: 1.0›
            ...
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from .base import Metric
from .config import TextSummaryOptions
from .log import logger


def summary(metric: Metric, data: Any, model: Any, options: Optional[TextSummaryOptions] = None) -> str:
    """Return the text summary of `distance(metric, data, model)`."""
    opts = options or TextSummaryOptions()
    logger.debug(f"Summarizing {metric!r} with {opts}")
    return metric.summary(data, model, opts)


def summarize(
    metric: Metric,
    data: Any,
    model: Any,
    options: Optional[TextSummaryOptions] = None,
    file: Optional[TextIO] = None,
) -> str:
    """Return the text summary of `distance(metric, data, model)`, also printing it to `file` (default stdout)."""
    text = summary(metric, data, model, options)
    print(text, file=sys.stdout if file is None else file)
    return text


__all__ = ["summarize", "summary"]
