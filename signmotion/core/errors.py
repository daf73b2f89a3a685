# ============================================================
# core/errors.py - Exception types
# ============================================================


class SignMotionError(Exception):
    """Base class for all engine errors."""


class InvalidGlossError(SignMotionError, ValueError):
    """Empty or whitespace-only gloss: nothing to sign or spell."""

    def __init__(self, gloss):
        self.gloss = gloss
        super().__init__(f"Invalid gloss: {gloss!r}")


class CorruptIndexError(SignMotionError):
    """A reference table entry is missing required fields."""

    def __init__(self, table: str, key: str, problem: str):
        self.table = table
        self.key = key
        self.problem = problem
        super().__init__(f"{table}[{key}]: {problem}")
