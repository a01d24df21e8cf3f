"""
parenc Compiler Configuration
=============================

Compiler options shared by the pipeline driver, the tree printers and
the command-line tool. Configuration can come from:
- Default values (defined here)
- Keyword arguments
- Environment variables (CompilerOptions.from_env)

Environment Variables
---------------------
| Variable              | Field          | Example      |
|-----------------------|----------------|--------------|
| PARENC_TRACE          | trace_stages   | 1, true, on  |
| PARENC_PRINTER_INDENT | printer_indent | "  "         |
"""

from dataclasses import dataclass
import os


# Values of PARENC_TRACE that switch stage tracing on
_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        trace_stages: Log every intermediate product (tokens, source AST,
                      target AST) at DEBUG level while compiling
        printer_indent: String repeated once per depth level by the tree
                        printers (default: one tab)
    """
    trace_stages: bool = False
    printer_indent: str = "\t"

    @classmethod
    def from_env(cls) -> "CompilerOptions":
        """
        Create CompilerOptions from environment variables.

        Environment variables (all optional):
            PARENC_TRACE: Enable stage tracing ("1", "true", "yes", "on")
            PARENC_PRINTER_INDENT: Indent string for tree printers

        Returns:
            CompilerOptions with values from environment variables
        """
        options = cls()

        if trace := os.environ.get("PARENC_TRACE"):
            options.trace_stages = trace.strip().lower() in _TRUTHY

        if indent := os.environ.get("PARENC_PRINTER_INDENT"):
            options.printer_indent = indent

        return options
