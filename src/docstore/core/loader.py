"""Read documents from a YAML or JSON file"""

from pathlib import Path

import yaml

from docstore.core.models import Document


def load_documents(path: Path) -> list[Document]:
    """Parse path into Documents.

    The top level is either a list of document mappings or a mapping with a
    'documents' list. Raises ValueError on malformed YAML or an unexpected shape.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e

    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"Invalid {path.name}: missing 'documents' key")
        data = data["documents"]
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path.name}: expected a list of documents")
    return [Document.model_validate(item) for item in data]
