"""A tiny arithmetic logic unit that reports a status with its result."""

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional


class Status(IntEnum):
    """Outcome of an ALU operation."""

    NOT_CALCED_YET = -1
    NORMAL = 0
    OPERAND1_WRONG = 1
    OPERAND2_WRONG = 2
    OPCODE_WRONG = 3


@dataclass
class Result:
    """Status of a calculation and, when it succeeded, its value."""

    status: Status = Status.NOT_CALCED_YET
    value: Optional[int] = None


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "ADD": operator.add,
    "SUB": operator.sub,
    "MUL": operator.mul,
}


@dataclass
class ALU:
    """Holds two operands and an opcode; ``enable_signal`` computes."""

    operand1: Optional[int] = None
    operand2: Optional[int] = None
    opcode: Optional[str] = None

    def enable_signal(self) -> Result:
        """Run the configured operation and return its result."""
        if self.operand1 is None:
            return Result(Status.OPERAND1_WRONG)
        if self.operand2 is None:
            return Result(Status.OPERAND2_WRONG)
        operation = _OPERATIONS.get(self.opcode or "")
        if operation is None:
            return Result(Status.OPCODE_WRONG)
        return Result(Status.NORMAL, operation(self.operand1, self.operand2))