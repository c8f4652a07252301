"""
Medication form state

Purpose: own the rows the user is editing, the autocomplete suggestions and one submit cycle
(loading flag, last result, user-facing notices). Renderers (UI_main.py) only read this state
and call its operations.

Input: user actions (add/remove row, edit field, focus, pick suggestion, submit).

Output: rows, suggestions, active_row_id, is_loading, last_result, notices.

Example:
    form = MedicationForm(analyze=fake_analyze)
    form.edit_field(form.rows[0].id, "name", "Aspirin")
    form.edit_field(form.rows[0].id, "dosage", " 81mg ")
    form.submit()  -> analyze(AnalysisRequest(medications=[Medication(name="Aspirin", dosage="81mg")]))
"""
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence
import itertools
import logging

from schemas import AnalysisRequest, AnalysisResult, Medication
from catalog import COMMON_MEDICATIONS, suggest
import analysis_service

logger = logging.getLogger(__name__)

FIELDS = ("name", "dosage")

INPUT_REQUIRED_TITLE = "Input Required"
INPUT_REQUIRED_MESSAGE = "Please add at least one medication and dosage."
ANALYSIS_FAILED_TITLE = "Analysis Failed"


@dataclass
class MedicationRow:
    """One editable row; id is only a stable key for the renderer."""
    id: str
    name: str = ""
    dosage: str = ""

    def is_filled(self) -> bool:
        return bool(self.name.strip() and self.dosage.strip())


@dataclass
class Notice:
    """Transient notification (toast) for the user."""
    variant: str  # "destructive" | "default"
    title: str
    description: str


class MedicationForm:
    """Editable medication list driving one analysis request per submit."""

    def __init__(
        self,
        analyze: Optional[Callable[[AnalysisRequest], AnalysisResult]] = None,
        catalog: Sequence[str] = COMMON_MEDICATIONS,
        id_prefix: str = "med"
    ):
        self._analyze = analyze or analysis_service.analyze
        self._catalog = catalog
        self._id_prefix = id_prefix
        self._counter = itertools.count()

        self.rows: List[MedicationRow] = []
        self.suggestions: List[str] = []
        self.active_row_id: Optional[str] = None
        self.is_loading = False
        self.last_result: Optional[AnalysisResult] = None
        self.notices: List[Notice] = []

        self.add_row()

    # ═════════════════════════════════════════════════════════════
    # ROWS
    # ═════════════════════════════════════════════════════════════

    def add_row(self) -> MedicationRow:
        row = MedicationRow(id=f"{self._id_prefix}-{next(self._counter)}")
        self.rows.append(row)
        return row

    def remove_row(self, row_id: str) -> None:
        self.rows = [row for row in self.rows if row.id != row_id]

    def get_row(self, row_id: str) -> Optional[MedicationRow]:
        for row in self.rows:
            if row.id == row_id:
                return row
        return None

    def edit_field(self, row_id: str, field: str, value: str) -> None:
        if field not in FIELDS:
            raise ValueError(f"Unknown field: {field!r}")

        row = self.get_row(row_id)
        if row is not None:
            setattr(row, field, value)

        if field == "name":
            if value:
                self.suggestions = suggest(value, self._catalog)
                self.active_row_id = row_id
            else:
                self.suggestions = []
                self.active_row_id = None

    # ═════════════════════════════════════════════════════════════
    # AUTOCOMPLETE
    # ═════════════════════════════════════════════════════════════

    def focus_row(self, row_id: str) -> None:
        self.active_row_id = row_id
        row = self.get_row(row_id)
        if row is not None and row.name:
            self.suggestions = suggest(row.name, self._catalog)

    def select_suggestion(self, row_id: str, suggestion: str) -> None:
        self.edit_field(row_id, "name", suggestion)
        self.suggestions = []
        self.active_row_id = None

    def dismiss_suggestions(self) -> None:
        self.active_row_id = None

    # ═════════════════════════════════════════════════════════════
    # SUBMIT
    # ═════════════════════════════════════════════════════════════

    def filled_medications(self) -> List[Medication]:
        """Rows with both fields set, trimmed, without their ids."""
        return [
            Medication(name=row.name.strip(), dosage=row.dosage.strip())
            for row in self.rows
            if row.is_filled()
        ]

    def submit(self) -> Optional[AnalysisResult]:
        """
        Run one analysis for the filled rows.

        Returns:
            The AnalysisResult, or None when nothing was sent (already loading / no filled rows)
        """
        if self.is_loading:
            logger.warning("[FORM] Submit ignored, an analysis is already running")
            return None

        medications = self.filled_medications()
        if not medications:
            self.notices.append(Notice("destructive", INPUT_REQUIRED_TITLE, INPUT_REQUIRED_MESSAGE))
            return None

        self.is_loading = True
        self.last_result = None
        try:
            result = self._analyze(AnalysisRequest(medications=medications))
        finally:
            self.is_loading = False

        if result.error:
            self.notices.append(Notice("destructive", ANALYSIS_FAILED_TITLE, result.error))

        self.last_result = result
        return result

    def pop_notices(self) -> List[Notice]:
        notices, self.notices = self.notices, []
        return notices
