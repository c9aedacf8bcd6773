'''
    File Name: expense.py
    Version: 1.0.0
    Date: 17/10/2026
    Description: Expense data model for the expense tracker.
'''
from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class Expense:
    """
    Represents a single recorded expense, as stored in the expenses table.

    Attributes:
        id: Store-assigned identifier, never reused
        amount: Positive amount spent
        category: Category name (e.g., "Food", "Books", "Rent")
        note: Optional free-text note (None when empty)
        date: Expense date in ISO format (YYYY-MM-DD)
    """
    id: int
    amount: float
    category: str
    note: Optional[str]
    date: str  # ISO format: YYYY-MM-DD

    def to_dict(self) -> dict:
        """Convert expense to a plain dictionary."""
        return {
            "id": self.id,
            "amount": self.amount,
            "category": self.category,
            "note": self.note,
            "date": self.date,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Expense":
        """Create an Expense from a store row (column name -> value)."""
        return cls(
            id=int(row["id"]),
            amount=float(row["amount"]),
            category=row["category"],
            note=row.get("note"),
            date=row.get("date") or "",
        )

    def __repr__(self) -> str:
        return f"Expense(id={self.id}, amount={self.amount}, category='{self.category}', date={self.date})"
