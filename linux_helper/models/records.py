"""
linux_helper/models/records.py
Typed content records shared by every page.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Protocol, Union

RecordKey = Union[int, str]


@dataclass(frozen=True, slots=True)
class DetailBlock:
    """One piece of expanded detail: a heading plus text and/or a code block."""

    heading: str
    text: Optional[str] = None
    code: Optional[str] = None
    language: str = "bash"


class Record(Protocol):
    """Common shape of every record kind."""

    id: int

    @property
    def key(self) -> str: ...

    @property
    def title(self) -> str: ...

    @property
    def summary(self) -> str: ...

    @property
    def searchable_fields(self) -> tuple[str, ...]: ...

    @property
    def detail(self) -> tuple[DetailBlock, ...]: ...


@dataclass(frozen=True, slots=True)
class ErrorEntry:
    """A common error message with its meaning, causes and fix."""

    kind: ClassVar[str] = "error"

    id: int
    error: str
    meaning: str
    causes: tuple[str, ...]
    solution: str
    example: Optional[str] = None

    @property
    def key(self) -> str:
        return f"error-{self.id}"

    @property
    def title(self) -> str:
        return self.error

    @property
    def summary(self) -> str:
        return self.meaning

    @property
    def searchable_fields(self) -> tuple[str, ...]:
        return (self.error, self.meaning, *self.causes)

    @property
    def detail(self) -> tuple[DetailBlock, ...]:
        blocks = [
            DetailBlock("Common Causes", text="\n".join(f"• {c}" for c in self.causes)),
            DetailBlock("Solution", code=self.solution),
        ]
        if self.example:
            blocks.append(DetailBlock("Example", text=f"$ {self.example}"))
        return tuple(blocks)


@dataclass(frozen=True, slots=True)
class ChecklistItem:
    """A troubleshooting step. Keyed as ``item-<index>``."""

    kind: ClassVar[str] = "checklist"

    id: int
    title: str
    description: str
    commands: tuple[str, ...]
    notes: str

    @property
    def key(self) -> str:
        return f"item-{self.id}"

    @property
    def summary(self) -> str:
        return self.description

    @property
    def searchable_fields(self) -> tuple[str, ...]:
        return (self.title, self.description)

    @property
    def detail(self) -> tuple[DetailBlock, ...]:
        return (
            DetailBlock("Commands", code="\n".join(self.commands)),
            DetailBlock("Notes", text=self.notes),
        )


@dataclass(frozen=True, slots=True)
class GuideSection:
    """An accordion section of a guide page."""

    kind: ClassVar[str] = "guide"

    id: int
    title: str
    summary: str
    blocks: tuple[DetailBlock, ...] = ()

    @property
    def key(self) -> str:
        return f"section-{self.id}"

    @property
    def searchable_fields(self) -> tuple[str, ...]:
        return (self.title, self.summary, *(block.heading for block in self.blocks))

    @property
    def detail(self) -> tuple[DetailBlock, ...]:
        return self.blocks
