from .parsing import (
    DiagnosticLine,
    PositionInfo,
    TaskMessage,
    WarningMessage,
    WarningTask,
    parse_diagnostic_line,
    parse_diagnostics,
)

__version__ = "0.1.0"
