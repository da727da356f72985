from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class RunState:
    """Счетчики одного суточного запуска. Не сохраняются между запусками."""

    target: int
    done: int = 0
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
    total_sent: int = 0

    @property
    def finished(self):
        return self.done >= self.target

    def record(self, outcome, amount=0):
        if outcome is Outcome.SUCCEEDED:
            self.succeeded += 1
            self.total_sent += amount
        elif outcome is Outcome.FAILED:
            self.failed += 1
        else:
            self.skipped += 1

    def tick(self):
        if self.finished:
            raise RuntimeError(f"Daily target {self.target} already reached")
        self.done += 1
