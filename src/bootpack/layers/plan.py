"""Build plan entries produced at detection time."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass
class Plan:
    """A detected capability and the metadata handed to later phases."""

    name: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "metadata": self.metadata}


@dataclass
class Plans:
    """All plan entries from one detection run."""

    entries: list[Plan] = field(default_factory=list)

    def add(self, plan: Plan) -> None:
        self.entries.append(plan)

    def names(self) -> list[str]:
        return [p.name for p in self.entries]

    def to_dict(self) -> dict[str, Any]:
        return {"entries": [p.to_dict() for p in self.entries]}

    def to_yaml(self) -> str:
        """Convert plans to YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)

    def save(self, path: Path | str) -> None:
        """Save as YAML, or JSON when the path ends in .json."""
        path = Path(path)
        if path.suffix == ".json":
            path.write_text(json.dumps(self.to_dict(), indent=2))
        else:
            path.write_text(self.to_yaml())

    @classmethod
    def load(cls, path: Path | str) -> "Plans":
        path = Path(path)
        text = path.read_text()
        data = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
        return cls(entries=[
            Plan(name=e["name"], metadata=e.get("metadata", {}))
            for e in (data or {}).get("entries", [])
        ])
