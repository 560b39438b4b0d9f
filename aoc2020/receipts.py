"""
Run receipts: schema, JSONL writer and lookup.

One JSONL line per solved day. A receipt records which input was solved
(path + SHA256), the answers, the elapsed time and, when expected answers
are known, a triage of the answers against them.
"""

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence


def sha256_text(text: str) -> str:
    """Hex SHA256 of the UTF-8 encoded input text."""
    return hashlib.sha256(text.encode('utf-8')).hexdigest()


def build_day_receipt(
    day: int,
    title: str,
    input_path: Path,
    input_sha256: str,
    answers: Dict[str, Optional[int]],
    elapsed_us: int,
) -> Dict[str, Any]:
    """
    Build the receipt dict for a single day's run.

    Args:
        day: Puzzle day (1-17)
        title: Puzzle title
        input_path: Input file that was solved
        input_sha256: SHA256 of the input text
        answers: {"part1": ..., "part2": ...}, None for a part not run
        elapsed_us: Wall time of parse + solve in microseconds

    Returns:
        Receipt dict
    """
    return {
        "day": day,
        "title": title,
        "input_path": str(input_path),
        "input_sha256": input_sha256,
        "part1": answers.get("part1"),
        "part2": answers.get("part2"),
        "elapsed_us": elapsed_us,
    }


def triage(receipt: Dict[str, Any], expected: Optional[Sequence[Optional[int]]]) -> Dict[str, Any]:
    """
    Compare a receipt's answers against expected [part1, part2].

    Parts with no answer or no expectation are left out of the comparison.
    Status is SKIPPED when nothing could be compared, MATCH when every
    compared part agrees, MISMATCH otherwise.
    """
    if not expected:
        return {"status": "SKIPPED", "reason": "NO_EXPECTED"}

    checks: Dict[str, bool] = {}
    for part, want in zip(("part1", "part2"), expected):
        got = receipt.get(part)
        if want is None or got is None:
            continue
        checks[part] = (got == want)

    if not checks:
        return {"status": "SKIPPED", "reason": "NOTHING_COMPARED"}
    status = "MATCH" if all(checks.values()) else "MISMATCH"
    return {"status": status, "match": checks}


class ReceiptWriter:
    """
    JSONL writer for receipts.

    Each receipt is written as a single line.
    """

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.file_handle = None

    def __enter__(self):
        self.file_handle = open(self.output_path, 'w', encoding='utf-8')
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.file_handle:
            self.file_handle.close()

    def write(self, receipt: Dict[str, Any]):
        """Write a single receipt as a JSON line."""
        if not self.file_handle:
            raise RuntimeError("ReceiptWriter not opened (use context manager)")

        self.file_handle.write(json.dumps(receipt, sort_keys=True, ensure_ascii=False))
        self.file_handle.write('\n')
        self.file_handle.flush()


def write_jsonl(output_path: Path, receipts: List[Dict[str, Any]]) -> None:
    """Write all receipts to a JSONL file, replacing it."""
    with ReceiptWriter(output_path) as writer:
        for receipt in receipts:
            writer.write(receipt)


def read_receipts(receipts_path: Path) -> List[Dict[str, Any]]:
    """
    Read all receipts from a JSONL file.

    Args:
        receipts_path: Path to receipts.jsonl

    Returns:
        List of receipt dictionaries
    """
    receipts = []
    with open(receipts_path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line:
                receipts.append(json.loads(line))
    return receipts


def find_receipt(receipts_path: Path, day: int) -> Optional[Dict[str, Any]]:
    """Last receipt recorded for a day, None if the day was never run."""
    found = None
    for receipt in read_receipts(receipts_path):
        if receipt.get("day") == day:
            found = receipt
    return found
