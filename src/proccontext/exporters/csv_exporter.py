"""CSV exporter for parsed command lines."""

from pathlib import Path
from typing import List, TextIO
import csv

from proccontext.batch import ParseOutcome

FIELDNAMES = [
    "line", "execute_path", "runtime", "identity", "args",
    "jmx_enable", "jmx_port", "service", "tag", "error"
]


class CSVExporter:
    """Export parse outcomes to a CSV file, one row per command line."""

    def __init__(self, tag_prefix: str = "process_context") -> None:
        self.tag_prefix = tag_prefix

    def export(self, outcomes: List[ParseOutcome], output_path: Path) -> None:
        """Export outcomes to CSV file."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", newline="") as f:
            self.write(outcomes, f)

    def write(self, outcomes: List[ParseOutcome], stream: TextIO) -> None:
        """Write outcomes as CSV to an open text stream."""
        writer = csv.DictWriter(stream, fieldnames=FIELDNAMES)
        writer.writeheader()

        for outcome in outcomes:
            cmd = outcome.command
            payload = cmd.payload if cmd else None
            java = cmd.java if cmd else None
            writer.writerow({
                "line": outcome.line,
                "execute_path": cmd.execute_path if cmd else "",
                "runtime": cmd.runtime.value if cmd and cmd.runtime else "",
                "identity": (cmd.identity or "") if cmd else "",
                "args": " ".join(payload.args) if payload else "",
                "jmx_enable": java.jmx_enable if java else "",
                "jmx_port": java.jmx_port if java else "",
                "service": outcome.service or "",
                "tag": outcome.tag(self.tag_prefix) or "",
                "error": str(outcome.error) if outcome.error else ""
            })
