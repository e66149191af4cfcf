"""Client-local cart cache: a JSON file, or plain memory when no path is given."""

import json
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class LocalCartStore:
    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        self._memory: dict[str, int] = {}

    def load(self) -> dict[str, int]:
        """Return the saved quantity map. A missing or unreadable file reads as empty."""
        if self.path is None:
            return dict(self._memory)
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return {str(recipe_id): int(quantity) for recipe_id, quantity in data.items() if int(quantity) > 0}
        except (ValueError, TypeError, AttributeError) as exc:
            logger.warning("Discarding unreadable local cart", path=str(self.path), error=str(exc))
            self.delete()
            return {}

    def save(self, items: dict[str, int]) -> None:
        if self.path is None:
            self._memory = dict(items)
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items, sort_keys=True), encoding="utf-8")

    def delete(self) -> None:
        self._memory = {}
        if self.path is not None and self.path.exists():
            self.path.unlink()
