from .assembler import AssemblyResult, assemble_lines, default_output_path, run
from .exceptions import AssemblerException

__all__ = [
    "AssemblerException",
    "AssemblyResult",
    "assemble_lines",
    "default_output_path",
    "run",
]
