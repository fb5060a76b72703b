"""
Pydantic models for employee data.

``EmployeeBase`` holds the mutable fields shared by every schema.
``EmployeeCreate`` adds the caller‑supplied ``id`` for requests,
``EmployeeUpdate`` carries the replacement values for ``PUT`` and
``Employee`` is the stored record returned by the API.

Request bodies accept ``dept`` as an alias of ``department`` because
older clients serialise the field under that name.
"""

from pydantic import AliasChoices, BaseModel, Field


class EmployeeBase(BaseModel):
    name: str = Field(..., examples=["User1"])
    department: str = Field(
        ...,
        validation_alias=AliasChoices("department", "dept"),
        examples=["ENG"],
    )


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee."""

    id: str = Field(..., min_length=1, examples=["6"])


class EmployeeUpdate(EmployeeBase):
    """Schema for updating an employee.

    Both ``name`` and ``department`` are replaced.  An ``id`` in the
    body is ignored; the path parameter identifies the record.
    """


class Employee(EmployeeBase):
    """A stored employee record.

    Instances are frozen: an update produces a new instance, so a
    record handed to a caller never changes underneath it.
    """

    id: str

    model_config = {
        "frozen": True,
    }
