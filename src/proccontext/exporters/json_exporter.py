"""JSON exporter for parsed command lines."""

from pathlib import Path
from typing import List
import json

from proccontext.batch import ParseOutcome


class JSONExporter:
    """Export parse outcomes to JSON format."""

    def __init__(self, tag_prefix: str = "process_context") -> None:
        self.tag_prefix = tag_prefix

    def to_data(self, outcomes: List[ParseOutcome]) -> dict:
        """Build the JSON document for a list of outcomes."""
        return {
            "metadata": {
                "total": len(outcomes),
                "parsed": sum(1 for o in outcomes if o.ok),
                "failed": sum(1 for o in outcomes if not o.ok)
            },
            "commands": [
                {**outcome.to_dict(), "tag": outcome.tag(self.tag_prefix)}
                for outcome in outcomes
            ]
        }

    def export(self, outcomes: List[ParseOutcome], output_path: Path) -> None:
        """Export outcomes to JSON file."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(self.to_data(outcomes), f, indent=2, default=str)
