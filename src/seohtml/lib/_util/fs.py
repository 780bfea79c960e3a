from pathlib import Path


def ensure_dir(path: Path) -> None:
    """Create a directory (and parents) if it doesn't exist."""
    path.mkdir(parents=True, exist_ok=True)


def read_text_file(path: Path, label: str) -> str:
    """Read *path* as UTF-8, exiting with a diagnostic naming *label* on failure."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        raise SystemExit(f"Error loading {label} from {path}: file not found")
    except (OSError, UnicodeDecodeError) as e:
        raise SystemExit(f"Error loading {label} from {path}: {e}")


def write_text_file(path: Path, content: str) -> None:
    """Write *content* to *path* as UTF-8, creating parent directories."""
    ensure_dir(path.parent)
    # newline="" keeps the minified text byte-for-byte on every platform
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
