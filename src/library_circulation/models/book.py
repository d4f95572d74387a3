"""
Book model for the Library Circulation service.

A Book is one catalogued title and the number of copies currently available
for loan. The circulation service mutates instances in place and hands the
same instance back to the book directory. Assignments are validated.

The copy count is not constrained to be non-negative here: the service's
borrow logic is what keeps callers from ever observing a negative count.
"""

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """Represents a catalogued title and its available copy count."""

    title: str = Field(
        ...,
        description="The title of the book, unique within a directory",
        min_length=1,
        examples=["Dune", "1984"],
    )

    copies: int = Field(
        ...,
        description="Number of copies currently available for checkout",
        examples=[0, 1, 3],
    )

    @property
    def is_available(self) -> bool:
        """Check if the book has any available copies."""
        return self.copies > 0

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={"example": {"title": "Dune", "copies": 2}},
    )
