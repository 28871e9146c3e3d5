"""Loader for the .md prompt templates bundled with the package."""

from functools import lru_cache
from pathlib import Path

TEMPLATE_DIR = Path(__file__).parent / "md"


@lru_cache(maxsize=32)
def load_prompt(name: str) -> str:
    """Read one template by stem, e.g. ``load_prompt("linkedin")``.

    Platform templates are str.format() strings; the guideline files
    (brand_names, avoid_exaggeration, informal_address) carry no placeholders.

    Raises:
        ValueError: If ``name`` resolves outside the template directory
        FileNotFoundError: If no template with that name exists
    """
    root = TEMPLATE_DIR.resolve()
    path = (root / f"{name}.md").resolve()
    if not path.is_relative_to(root):
        raise ValueError(f"Invalid prompt name: {name}")
    if not path.is_file():
        raise FileNotFoundError(f"No prompt template named '{name}' in {root}")
    return path.read_text(encoding="utf-8")
