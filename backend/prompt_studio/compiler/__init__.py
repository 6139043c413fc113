from .markdown import compile_markdown
from .export import (
    build_json_export,
    compile_json,
    export_filename,
    render_export,
    write_export,
)

__all__ = [
    "compile_markdown",
    "build_json_export",
    "compile_json",
    "export_filename",
    "render_export",
    "write_export",
]
