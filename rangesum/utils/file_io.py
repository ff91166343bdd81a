import json
from pathlib import Path
from typing import Any


def write_to_file(content: list[dict[str, Any]] | dict[str, Any] | str, filepath: str) -> None:
    """Writes content to a file in appropriate format.

    Args:
        content: Data to write (list of dicts, single dict, or string)
        filepath: Output file path

    Raises:
        TypeError: If content is not a supported type
        OSError: If file cannot be written
    """
    if not isinstance(content, (list, dict, str)):
        raise TypeError(f"Unsupported content type: {type(content)}")

    path = Path(filepath)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            if isinstance(content, str):
                f.write(content)
            else:
                json.dump(content, f, indent=2, ensure_ascii=False)
                f.write("\n")
    except OSError as e:
        raise OSError(f"Failed to write to file {filepath}: {e}") from e
