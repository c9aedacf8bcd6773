'''
    File Name: expense_form.py
    Version: 1.0.0
    Date: 17/10/2026
'''
from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QFormLayout,
    QLineEdit,
    QDateEdit,
    QPushButton,
    QHBoxLayout,
)
from PyQt6.QtCore import QDate


class ExpenseForm(QDialog):
    """Dialog to edit an existing expense.

    Usage:
        dlg = ExpenseForm(parent, expense=expense)
        if dlg.exec():
            values = dlg.get_values()

    The dialog does not validate; the ledger rejects bad values and reports
    why.
    """

    def __init__(self, parent=None, expense=None):
        super().__init__(parent)
        self._expense = expense

        self.setWindowTitle("Edit Expense")
        self.setup_ui()

        if expense is not None:
            self._load_expense(expense)

    def setup_ui(self) -> None:
        layout = QVBoxLayout()

        form = QFormLayout()

        self.amount = QLineEdit()
        self.amount.setPlaceholderText("Amount (e.g. 12.50)")
        form.addRow("Amount:", self.amount)

        self.category = QLineEdit()
        self.category.setPlaceholderText("Category (Food, Books, Rent...)")
        form.addRow("Category:", self.category)

        self.note = QLineEdit()
        self.note.setPlaceholderText("Note (optional)")
        form.addRow("Note:", self.note)

        self.date = QDateEdit()
        self.date.setCalendarPopup(True)
        self.date.setDisplayFormat("yyyy-MM-dd")
        self.date.setDate(QDate.currentDate())
        form.addRow("Date:", self.date)

        layout.addLayout(form)

        # Buttons
        btn_layout = QHBoxLayout()
        self.save_btn = QPushButton("Save")
        self.cancel_btn = QPushButton("Cancel")
        btn_layout.addStretch(1)
        btn_layout.addWidget(self.save_btn)
        btn_layout.addWidget(self.cancel_btn)

        layout.addLayout(btn_layout)

        self.setLayout(layout)

        # Connections
        self.save_btn.clicked.connect(self.accept)
        self.cancel_btn.clicked.connect(self.reject)

    def _load_expense(self, expense) -> None:
        self.amount.setText(repr(expense.amount))
        self.category.setText(expense.category)
        self.note.setText(expense.note or "")
        parsed = QDate.fromString(expense.date, "yyyy-MM-dd")
        if parsed.isValid():
            self.date.setDate(parsed)

    def get_values(self) -> dict:
        return {
            "amount": self.amount.text(),
            "category": self.category.text(),
            "note": self.note.text(),
            "date": self.date.date().toString("yyyy-MM-dd"),
        }
