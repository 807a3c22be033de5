import json
import traceback
from pathlib import Path
from typing import Any, Sequence

from linkharvest.core.logging import log
from linkharvest.harvest.session import Session

def safe_read_json(path: Path, default: Any = None) -> Any:
    """
    Safely read a JSON file with robust error handling.
    """
    if default is None:
        default = {}
    
    try:
        if path.exists():
            content = path.read_text(encoding="utf-8")
            if not content.strip():
                return default
            return json.loads(content)
    except json.JSONDecodeError as e:
        log(f"Corrupted JSON in {path.name}: {e}", level="error")
    except PermissionError as e:
        log(f"Permission denied reading {path.name}: {e}", level="error")
    except OSError as e:
        log(f"IO error reading {path.name}: {e}", level="warning")
    
    return default

def safe_write_json(path: Path, data: Any) -> bool:
    """
    Safely write data to a JSON file, ensuring parent directories exist.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        return True
    except PermissionError as e:
        log(f"Permission denied writing to {path.name}: {e}", level="error")
    except OSError as e:
        log(f"IO error writing to {path.name}: {e}", level="error")
    except Exception:
        log(f"Unexpected error writing to {path.name}: {traceback.format_exc()}", level="error")
        raise
    
    return False

def format_header(session: Session) -> str:
    return (
        f"Collection: {session.title}\n"
        f"Link: {session.url}\n"
        f"Items: {session.expected_count}\n\n"
    )

def write_items_file(filepath: Path, session: Session, items: Sequence[str]) -> Path:
    """
    Write the header block and the harvested links, one per line.

    The file is truncated first, so a rerun never stacks header blocks.
    Items are written in the order given. Write errors are not caught.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(format_header(session))
    if items:
        with open(filepath, "a", encoding="utf-8") as f:
            f.write("\n".join(items) + "\n")
    log(f"Wrote {len(items)} links to {filepath}", level="debug", output_path=str(filepath), item_count=len(items))
    return filepath
