"""Runtime configuration for the batch driver"""

from dataclasses import dataclass
from typing import Optional

from .logging_system import LogLevel

# auto: postfix lines up to the first blank line, infix lines after it
VALID_MODES = ('auto', 'infix', 'postfix')


@dataclass
class CalculatorConfig:
    """Options that control how an expression file is processed."""
    mode: str = 'auto'
    continue_on_error: bool = False
    integer_output: bool = True   # truncate toward zero like an (int) cast
    exact: bool = False           # print the SymPy exact value instead
    log_level: LogLevel = LogLevel.MINIMAL
    log_file: Optional[str] = None

    def validate(self):
        """Raise ValueError on inconsistent options"""
        if self.mode not in VALID_MODES:
            raise ValueError(f"mode must be one of {VALID_MODES}, got {self.mode!r}")
        if not isinstance(self.log_level, LogLevel):
            raise ValueError(f"log_level must be a LogLevel, got {self.log_level!r}")
        return self

    @classmethod
    def from_args(cls, args) -> 'CalculatorConfig':
        return cls(
            mode=args.mode,
            continue_on_error=args.continue_on_error,
            integer_output=not args.float_output,
            exact=args.exact,
            log_level=LogLevel.from_name(args.log_level),
            log_file=args.log_file,
        ).validate()
