import logging
import os
from collections.abc import Iterable

IMPORT_FILE_NAME = "ImportStars.txt"


def import_file_path(output_dir: str) -> str:
    return os.path.join(output_dir, IMPORT_FILE_NAME)


def write_import_stars(output_dir: str, names: Iterable[str]) -> str:
    """Overwrite the import file with one system name per line. Returns its path."""
    path = import_file_path(output_dir)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    text = "\n".join(names) + "\n"
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    logging.info(f"Wrote {path}")
    return path
