"""In-memory history of analyses.

The store keeps at most ``max_size`` analyses and drops the oldest first.
It lives in process memory, so history is lost on restart and is not shared
between workers.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Optional

from .models import Analysis

logger = logging.getLogger(__name__)

RECENT_LIMIT = 50


class AnalysisStore:
    def __init__(self, max_size: int = 500):
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self._analyses: OrderedDict[str, Analysis] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._analyses)

    def save(self, analysis: Analysis) -> str:
        """Store a copy of ``analysis`` under a new id and return the id."""
        analysis_id = uuid.uuid4().hex
        record = analysis.model_copy(update={
            "id": analysis_id,
            "created_at": datetime.now(timezone.utc),
        })
        with self._lock:
            self._analyses[analysis_id] = record
            while len(self._analyses) > self.max_size:
                evicted, _ = self._analyses.popitem(last=False)
                logger.info(f"History full, dropped analysis {evicted}")
        return analysis_id

    def list_recent(self, limit: int = RECENT_LIMIT) -> list[Analysis]:
        """Newest analyses first, without their source code."""
        with self._lock:
            newest = list(reversed(self._analyses.values()))[:max(limit, 0)]
        return [analysis.model_copy(update={"code": None}) for analysis in newest]

    def get(self, analysis_id: str) -> Optional[Analysis]:
        with self._lock:
            return self._analyses.get(analysis_id)

    def delete(self, analysis_id: str) -> bool:
        with self._lock:
            return self._analyses.pop(analysis_id, None) is not None
