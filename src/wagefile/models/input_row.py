"""Employee input row as supplied by a row source."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Column headers of the employee spreadsheet, also used as error field names
COL_FULL_NAME = "FULL_NAME"
COL_SSN = "SSN"
COL_SALARY = "SALARY"
COL_ACCOUNT = "Numero de cuenta patronal"
COL_QUARTER = "Trimestre (3 characters)"
COL_BATCH = "Batch Number (6)"

REQUIRED_COLUMNS: tuple[str, ...] = (COL_FULL_NAME, COL_SSN, COL_SALARY, COL_ACCOUNT, COL_QUARTER)

# Column header -> InputRow attribute
COLUMN_FIELDS: dict[str, str] = {
    COL_FULL_NAME: "full_name",
    COL_SSN: "ssn",
    COL_SALARY: "salary",
    COL_ACCOUNT: "account_number",
    COL_QUARTER: "quarter_code",
}


class InputRow(BaseModel):
    """One employee record, loosely typed, as read from a spreadsheet or form."""

    model_config = {"frozen": True}

    row_number: int = Field(ge=1)
    full_name: str = ""
    ssn: str = ""
    salary: str = ""
    account_number: str = ""
    quarter_code: str = ""

    @property
    def is_blank(self) -> bool:
        """True when every text field is empty or whitespace."""
        return not any(
            value.strip()
            for value in (self.full_name, self.ssn, self.salary, self.account_number, self.quarter_code)
        )
