"""Logic for generating reports on a batch of route resolutions."""

import hashlib
import json
import logging
import time
from pathlib import Path
from typing import Any

from route_resolver.resolved_route import ResolvedRoute

logger = logging.getLogger(__name__)

# Config sections that change how a route resolves
SETTINGS_KEYS = ("resolution", "components")


def settings_hash(config: dict[str, Any]) -> str:
    """Hash the resolution-affecting part of a config, independent of key order."""
    settings = {key: config.get(key) for key in SETTINGS_KEYS}
    canonical = json.dumps(settings, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class ResolutionReport:
    """Collects resolved routes and failures and summarizes them as JSON.

    Each report records the hash of the settings it was resolved with, so a
    report overwritten under different settings can be flagged.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize the report for the effective configuration."""
        self.settings_hash = settings_hash(config)
        self.results: list[ResolvedRoute] = []
        self.failures: list[dict[str, str]] = []
        self.start_time = time.time()

    def add_result(self, result: ResolvedRoute) -> None:
        """Add a successful resolution to the report."""
        self.results.append(result)

    def add_failure(self, route: str, error: Exception) -> None:
        """Record a route that failed to resolve."""
        self.failures.append(
            {"route": route, "error": type(error).__name__, "message": str(error)}
        )

    def build(self, previous_hash: str | None = None) -> dict[str, Any]:
        """Return the report as a JSON-serializable mapping."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "settings_hash": self.settings_hash,
                "previous_settings_hash": previous_hash,
                "settings_changed": (
                    previous_hash is not None and previous_hash != self.settings_hash
                ),
                "total_routes": len(self.results) + len(self.failures),
            },
            "results": [r.to_dict() for r in self.results],
            "failures": self.failures,
            "stats": self._compute_stats(),
        }

    def generate_report(self, path: str) -> bool:
        """Write the summary report to a JSON file.

        Returns True when the report it replaces was resolved with different
        settings.
        """
        p = Path(path)
        previous_hash = _read_settings_hash(p)
        report = self.build(previous_hash)
        if report["meta"]["settings_changed"]:
            logger.warning(
                "Report %s was previously produced with different resolution "
                "settings; results are not comparable",
                path,
            )
        p.write_text(json.dumps(report, indent=2), encoding="utf-8")
        return bool(report["meta"]["settings_changed"])

    def _compute_stats(self) -> dict[str, Any]:
        action_counts: dict[str, int] = {}
        entity_counts: dict[str, int] = {}
        error_counts: dict[str, int] = {}

        for r in self.results:
            action_counts[r.action.name] = action_counts.get(r.action.name, 0) + 1
            entity_counts[r.name] = entity_counts.get(r.name, 0) + 1
        for f in self.failures:
            error_counts[f["error"]] = error_counts.get(f["error"], 0) + 1

        return {
            "action_counts": action_counts,
            "entity_counts": entity_counts,
            "error_counts": error_counts,
            "max_depth": max((len(r.parents) for r in self.results), default=0),
        }


def _read_settings_hash(path: Path) -> str | None:
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning("Ignoring unreadable previous report %s", path)
        return None
    if not isinstance(data, dict):
        return None
    return (data.get("meta") or {}).get("settings_hash")
