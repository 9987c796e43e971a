"""Per-turn decision logger for the bot.

This module provides JSONL logging of planning decisions. Each turn's
candidates and committed moves are written as a single JSON line so that a
game can be analysed after the fact without re-running the engine.
"""

import json
import time
from datetime import datetime
from pathlib import Path
from typing import Any

from ..engine.planner import CandidateMove
from ..models.move import Move
from ..models.snapshot import TurnSnapshot


class DecisionLogger:
    """Logs planning decisions to a JSONL file.

    Usage: ``start_turn`` with the snapshot, ``log_candidates`` and
    ``log_moves`` as they become known, then ``end_turn`` to write the line.
    """

    def __init__(self, log_path: str):
        """Initialize logger writing to the given file.

        Args:
            log_path: JSONL file to append to (parent directories are created)
        """
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

        # Append mode so restarts keep earlier turns
        try:
            self.file_handle = open(self.log_path, "a", encoding="utf-8")
        except OSError as e:
            raise OSError(f"Failed to open log file {self.log_path}: {e}") from e

        self.turn_count = 0
        self.current_turn_data: dict[str, Any] | None = None
        self.turn_start_time: float | None = None

    def start_turn(self, snapshot: TurnSnapshot) -> None:
        """Start logging a new turn.

        Args:
            snapshot: Snapshot the turn is planned from
        """
        self.turn_count += 1
        self.current_turn_data = {
            "turn": self.turn_count,
            "timestamp": datetime.now().isoformat(),
            "planets": len(snapshot.planets),
            "my_planets": len(snapshot.mine()),
            "fleets": len(snapshot.fleets),
            "candidates": [],
            "moves": [],
        }
        self.turn_start_time = time.time()

    def log_candidates(self, candidates: list[CandidateMove]) -> None:
        """Record every profitable pair that was scored this turn."""
        if self.current_turn_data is None:
            return
        self.current_turn_data["candidates"] = [
            {
                "origin": c.origin,
                "destination": c.destination,
                "committed": c.committed,
                "cost": c.cost,
            }
            for c in candidates
        ]

    def log_moves(self, moves: list[Move]) -> None:
        """Record the moves sent back for this turn."""
        if self.current_turn_data is None:
            return
        self.current_turn_data["moves"] = [
            {"origin": m.origin, "destination": m.destination, "ship_count": m.ship_count}
            for m in moves
        ]

    def end_turn(self) -> None:
        """Write the current turn as one JSON line and reset."""
        if self.current_turn_data is None:
            return

        if self.turn_start_time is not None:
            elapsed = time.time() - self.turn_start_time
            self.current_turn_data["elapsed_ms"] = round(elapsed * 1000, 3)

        try:
            json_line = json.dumps(self.current_turn_data, separators=(",", ":"))
            self.file_handle.write(json_line + "\n")
            self.file_handle.flush()
        except OSError as e:
            raise OSError(f"Failed to write to log file: {e}") from e
        finally:
            self.current_turn_data = None
            self.turn_start_time = None

    def close(self) -> None:
        """Close the log file, flushing any unfinished turn."""
        if self.current_turn_data is not None:
            self.end_turn()
        if self.file_handle and not self.file_handle.closed:
            self.file_handle.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
