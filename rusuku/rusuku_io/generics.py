# rusuku/rusuku_io/generics.py
# Generic filesystem helpers for Rusuku IO operations

from pathlib import Path
from typing import Any
import json

from ..core.verbose import vlog_file_read


# read JSON w/ UTF-8 encoding, return dict
def read_json_safe(path: Path) -> dict[str, Any]:
    from ..core.exceptions import JSONParsingError

    text = Path(path).read_text(encoding="utf-8")
    vlog_file_read(path, len(text))
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        # create a trimmed snippet of the offending JSON for the error message
        lines = text.split("\n")
        # JSONDecodeError uses 1-based line numbers
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)

        numbered_lines = []
        for i, line in enumerate(lines[snippet_start:snippet_end], start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}")

    if not isinstance(data, dict):
        raise JSONParsingError(
            f"Expected a JSON object in {path}, got {type(data).__name__}"
        )
    return data
