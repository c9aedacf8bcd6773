'''
    File Name: expense_screen.py
    Version: 1.0.0
    Date: 17/10/2026
'''
import datetime
from pathlib import Path
import logging
from typing import Any, Callable, Optional

from PyQt6 import QtWidgets, QtCore
from config import APP_NAME, APP_VERSION, CURRENCY_SYMBOL, STYLESHEET_PATH, ensure_data_dir

from .expense_form import ExpenseForm
from database.db_manager import DatabaseManager
from database.schema import SchemaReconciler
from models.errors import StoreError
from services.ledger import ExpenseLedger
from services.reports import FILTER_ALL, FILTER_MONTH, FILTER_WEEK, LedgerView

logger = logging.getLogger(__name__)

FILTER_LABELS = {
    FILTER_ALL: "All",
    FILTER_WEEK: "This Week",
    FILTER_MONTH: "This Month",
}

EMPTY_MESSAGES = {
    FILTER_ALL: "No expenses yet.",
    FILTER_WEEK: "No expenses this week.",
    FILTER_MONTH: "No expenses this month.",
}


def format_money(value: float) -> str:
    return f"{CURRENCY_SYMBOL}{value:.2f}"


class ExpenseScreen(QtWidgets.QMainWindow):
    """The single expense screen: filters, totals, add form and expense list.

    All state lives in the ledger; this window only forwards user actions to
    it and re-renders whenever the ledger publishes a new view.
    """

    def __init__(self, *args, store: Optional[Any] = None,
                 today: Callable[[], datetime.date] = datetime.date.today, **kwargs):
        super().__init__(*args, **kwargs)

        # Ensure runtime data dir exists (safe)
        try:
            ensure_data_dir()
        except OSError:
            logger.exception("Failed ensuring data directory")

        self.setWindowTitle(f"{APP_NAME} — {APP_VERSION}")
        self.status = self.statusBar()
        self.status.showMessage("Ready")

        # Store may be injected by the app or a test
        self.store = store if store is not None else DatabaseManager()

        # Apply stylesheet if present (non-fatal)
        self._apply_stylesheet()

        self._build_ui()

        self._today = today
        self.ledger = ExpenseLedger(self.store, notify=self.show_notice, today=today)
        self.ledger.subscribe(self.render)
        self.setup_store()

        # Restore/Set initial window size (remember last state with QSettings)
        settings = QtCore.QSettings("expense-tracker", APP_NAME)
        geom = settings.value("geometry", None)
        if isinstance(geom, (bytes, bytearray)):
            geom = QtCore.QByteArray(bytes(geom))
        if isinstance(geom, QtCore.QByteArray) and not geom.isEmpty():
            self.restoreGeometry(geom)
        else:
            self.resize(520, 760)

    def _build_ui(self) -> None:
        central_widget = QtWidgets.QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QtWidgets.QVBoxLayout()
        main_layout.setSpacing(12)
        main_layout.setContentsMargins(16, 16, 16, 16)

        heading = QtWidgets.QLabel(APP_NAME)
        heading.setObjectName("heading")
        main_layout.addWidget(heading)

        # Filter buttons
        filter_layout = QtWidgets.QHBoxLayout()
        self.filter_group = QtWidgets.QButtonGroup(self)
        self.filter_group.setExclusive(True)
        self.filter_buttons = {}
        for mode, label in FILTER_LABELS.items():
            btn = QtWidgets.QPushButton(label)
            btn.setCheckable(True)
            btn.setChecked(mode == FILTER_ALL)
            btn.clicked.connect(lambda _checked=False, m=mode: self.on_filter_clicked(m))
            self.filter_group.addButton(btn)
            self.filter_buttons[mode] = btn
            filter_layout.addWidget(btn)
        main_layout.addLayout(filter_layout)

        # Totals
        totals_group = QtWidgets.QGroupBox()
        totals_group.setObjectName("totals")
        totals_layout = QtWidgets.QVBoxLayout()
        self.total_label = QtWidgets.QLabel()
        self.total_amount = QtWidgets.QLabel(format_money(0))
        self.total_amount.setObjectName("totalAmount")
        self.category_label = QtWidgets.QLabel()
        self.category_label.setVisible(False)
        totals_layout.addWidget(self.total_label)
        totals_layout.addWidget(self.total_amount)
        totals_layout.addWidget(self.category_label)
        totals_group.setLayout(totals_layout)
        main_layout.addWidget(totals_group)

        # Add expense form
        form_layout = QtWidgets.QVBoxLayout()
        self.amount_input = QtWidgets.QLineEdit()
        self.amount_input.setPlaceholderText("Amount (e.g. 12.50)")
        self.category_input = QtWidgets.QLineEdit()
        self.category_input.setPlaceholderText("Category (Food, Books, Rent...)")
        self.note_input = QtWidgets.QLineEdit()
        self.note_input.setPlaceholderText("Note (optional)")
        self.date_input = QtWidgets.QLineEdit()
        self.date_input.setPlaceholderText("Date (YYYY-MM-DD) - optional, defaults to today")
        self.add_btn = QtWidgets.QPushButton("Add Expense")
        for w in (self.amount_input, self.category_input, self.note_input, self.date_input, self.add_btn):
            form_layout.addWidget(w)
        main_layout.addLayout(form_layout)

        # Expenses table (select rows to edit/delete)
        self.expense_table = QtWidgets.QTableWidget(0, 5)
        self.expense_table.setHorizontalHeaderLabels(["ID", "Amount", "Category", "Note", "Date"])
        self.expense_table.setColumnHidden(0, True)
        self.expense_table.horizontalHeader().setStretchLastSection(True)
        self.expense_table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectionBehavior.SelectRows)
        self.expense_table.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)
        self.expense_table.setEditTriggers(QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers)
        self.expense_table.verticalHeader().setVisible(False)
        main_layout.addWidget(self.expense_table)

        self.empty_label = QtWidgets.QLabel(EMPTY_MESSAGES[FILTER_ALL])
        self.empty_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        main_layout.addWidget(self.empty_label)

        actions_layout = QtWidgets.QHBoxLayout()
        self.edit_btn = QtWidgets.QPushButton("Edit")
        self.delete_btn = QtWidgets.QPushButton("Delete")
        actions_layout.addWidget(self.edit_btn)
        actions_layout.addWidget(self.delete_btn)
        main_layout.addLayout(actions_layout)

        footer = QtWidgets.QLabel("Enter your expenses and they'll be saved locally with SQLite.")
        footer.setObjectName("footer")
        footer.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        main_layout.addWidget(footer)

        self.add_btn.clicked.connect(self.on_add_clicked)
        self.edit_btn.clicked.connect(self.on_edit_clicked)
        self.delete_btn.clicked.connect(self.on_delete_clicked)
        self.expense_table.doubleClicked.connect(self.on_edit_clicked)

        central_widget.setLayout(main_layout)

    def _apply_stylesheet(self) -> None:
        """Load and apply a stylesheet if the file exists; otherwise skip quietly."""
        path = Path(STYLESHEET_PATH)
        if not path.exists():
            logger.debug("Stylesheet not found at %s; skipping", path)
            return
        try:
            self.setStyleSheet(path.read_text(encoding="utf-8"))
            logger.debug("Applied stylesheet: %s", path)
        except OSError:
            logger.exception("Error reading stylesheet")

    def setup_store(self) -> None:
        """Reconcile the expenses table, then load it into the ledger."""
        try:
            SchemaReconciler(self.store, today=self._today).reconcile()
        except StoreError:
            # Keep running; every later store call fails and is reported on its own.
            self.show_notice("Setup error", "Could not prepare the expense database")
        self.ledger.load()

    def show_notice(self, title: str, message: str) -> None:
        """Log and present a warning message box to the user."""
        logger.warning("%s: %s", title, message)
        self.status.showMessage(message)
        QtWidgets.QMessageBox.warning(self, title, message)

    def render(self, view: LedgerView) -> None:
        """Show the ledger's current view: totals, breakdown and rows."""
        label = FILTER_LABELS[view.mode]
        self.total_label.setText(f"Total Spending ({label}):")
        self.total_amount.setText(format_money(view.total))

        if view.category_totals:
            lines = [f"By Category ({label}):"]
            lines += [f"    {cat}: {format_money(total)}" for cat, total in view.category_totals.items()]
            self.category_label.setText("\n".join(lines))
            self.category_label.setVisible(True)
        else:
            self.category_label.setText("")
            self.category_label.setVisible(False)

        self.expense_table.setRowCount(len(view.expenses))
        for r_idx, e in enumerate(view.expenses):
            self.expense_table.setItem(r_idx, 0, QtWidgets.QTableWidgetItem(str(e.id)))
            self.expense_table.setItem(r_idx, 1, QtWidgets.QTableWidgetItem(format_money(e.amount)))
            self.expense_table.setItem(r_idx, 2, QtWidgets.QTableWidgetItem(e.category))
            self.expense_table.setItem(r_idx, 3, QtWidgets.QTableWidgetItem(e.note or ""))
            self.expense_table.setItem(r_idx, 4, QtWidgets.QTableWidgetItem(e.date))
        self.expense_table.resizeColumnsToContents()

        self.empty_label.setText(EMPTY_MESSAGES[view.mode])
        self.empty_label.setVisible(not view.expenses)

    def _get_selected_expense_id(self) -> Optional[int]:
        """Return the expense ID for the currently selected row, or None."""
        sel = self.expense_table.selectionModel().selectedRows()
        if not sel:
            return None
        item = self.expense_table.item(sel[0].row(), 0)
        return int(item.text()) if item else None

    def closeEvent(self, event):
        settings = QtCore.QSettings("expense-tracker", APP_NAME)
        settings.setValue("geometry", self.saveGeometry())
        super().closeEvent(event)

    def on_filter_clicked(self, mode: str) -> None:
        logger.debug("on_filter_clicked %s", mode)
        self.filter_buttons[mode].setChecked(True)
        self.ledger.set_filter(mode)

    def on_add_clicked(self) -> None:
        """Send the inline form to the ledger; clear it once saved."""
        logger.debug("on_add_clicked")
        ok = self.ledger.add(
            self.amount_input.text(),
            self.category_input.text(),
            self.note_input.text(),
            self.date_input.text(),
        )
        if not ok:
            return
        for w in (self.amount_input, self.category_input, self.note_input, self.date_input):
            w.clear()
        self.status.showMessage("Expense added")

    def on_edit_clicked(self) -> None:
        logger.debug("on_edit_clicked")
        expense_id = self._get_selected_expense_id()
        expense = self.ledger.get(expense_id) if expense_id is not None else None
        if expense is None:
            QtWidgets.QMessageBox.information(self, "Select expense", "Please select an expense to edit.")
            self.status.showMessage("No expense selected")
            return

        dlg = ExpenseForm(self, expense=expense)
        # Rejected edits reopen the same dialog, so the user's input is kept.
        while dlg.exec():
            if self.ledger.update(expense.id, **dlg.get_values()):
                self.status.showMessage("Expense updated")
                return
        self.status.showMessage("Edit cancelled")

    def on_delete_clicked(self) -> None:
        logger.debug("on_delete_clicked")
        expense_id = self._get_selected_expense_id()
        if expense_id is None:
            QtWidgets.QMessageBox.information(self, "Select expense", "Please select an expense to delete.")
            self.status.showMessage("No expense selected")
            return

        reply = QtWidgets.QMessageBox.question(
            self,
            "Confirm delete",
            "Are you sure you want to delete this expense?",
            QtWidgets.QMessageBox.StandardButton.Yes | QtWidgets.QMessageBox.StandardButton.No,
        )
        if reply != QtWidgets.QMessageBox.StandardButton.Yes:
            self.status.showMessage("Delete cancelled")
            return

        if self.ledger.delete(expense_id):
            self.status.showMessage("Expense deleted")
