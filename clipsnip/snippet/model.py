from __future__ import annotations

from typing import Any, Dict, Iterator, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


class SnippetDefinition(BaseModel):
    """One named snippet: trigger prefix, body lines and description.

    Entries read from disk only need a prefix to be present; editors also
    accept a list of alternative prefixes, which is kept as written.
    """

    prefix: Union[str, List[str]]
    body: List[str] = Field(default_factory=list)
    description: str | None = None

    # Editor-specific keys such as "scope" survive a read/write cycle.
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("body", mode="before")
    @classmethod
    def _wrap_string_body(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


class SnippetStore(RootModel[Dict[str, SnippetDefinition]]):
    """Ordered mapping of snippet name to definition for one language."""

    root: Dict[str, SnippetDefinition] = Field(default_factory=dict)

    def __getitem__(self, name: str) -> SnippetDefinition:
        return self.root[name]

    def __contains__(self, name: object) -> bool:
        return name in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def names(self) -> List[str]:
        return list(self.root)

    def items(self) -> List[Tuple[str, SnippetDefinition]]:
        return list(self.root.items())

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json")
        for entry in data.values():
            if entry.get("description") is None:
                entry.pop("description", None)
        return data

    @classmethod
    def single(cls, name: str, definition: SnippetDefinition) -> "SnippetStore":
        return cls({name: definition})


__all__ = ["SnippetDefinition", "SnippetStore"]
