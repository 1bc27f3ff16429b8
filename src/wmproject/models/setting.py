"""Option value wrapper carrying presence and persistence flags."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Setting(BaseModel, Generic[T]):
    """A project option value.

    ``has`` records whether the option's element appeared in a parsed
    document. ``save`` records whether the writer should emit it. The two
    flags are independent: a caller may fill in a value for in-memory use
    without persisting it.
    """

    value: T
    has: bool = Field(default=False, description="Element was present in the document")
    save: bool = Field(default=True, description="Emit the option when writing")

    def assign(self, value: T) -> None:
        """Store an explicit value."""
        self.value = value
        self.has = True

    def clear(self, default: T) -> None:
        """Forget the explicit value."""
        self.value = default
        self.has = False
