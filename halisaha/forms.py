"""Base form for JSON request bodies."""

from __future__ import annotations

from typing import Any

from flask import request
from flask_wtf import FlaskForm  # type: ignore
from werkzeug.datastructures import ImmutableMultiDict
from wtforms import IntegerField

from .errors import ValidationError


def as_str(value: Any) -> Any:
    """Coerce a submitted scalar to a string."""
    if value is None:
        return None
    return str(value)


def as_text(value: Any) -> Any:
    """Coerce a submitted scalar to a stripped string."""
    if value is None:
        return None
    return str(value).strip()


class StrictIntegerField(IntegerField):
    """An IntegerField that refuses booleans and fractional numbers.

    JSON bodies deliver ``true`` and ``4.7`` as Python values that ``int()``
    would happily coerce; those are rejected with ``invalid_message``.
    Whole floats such as ``12.0`` are accepted.
    """

    def __init__(self, label=None, validators=None, invalid_message=None, **kwargs):
        super().__init__(label, validators, **kwargs)
        self.invalid_message = invalid_message

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        message = self.invalid_message or self.gettext("Not a valid integer value.")
        if isinstance(value, bool) or (
            isinstance(value, float) and not value.is_integer()
        ):
            self.data = None
            raise ValueError(message)
        try:
            self.data = int(value)
        except (TypeError, ValueError) as exc:
            self.data = None
            raise ValueError(message) from exc


class ApiForm(FlaskForm):
    """A FlaskForm populated from the JSON body of the current request."""

    class Meta:
        csrf = False

    @classmethod
    def from_request(cls) -> ApiForm:
        """Build the form from ``request.get_json()``.

        Null values are treated as missing. A body that is not a JSON object
        is rejected.
        """
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ValidationError("Geçersiz form verisi")
        formdata = ImmutableMultiDict(
            {k: v for k, v in payload.items() if v is not None}
        )
        return cls(formdata=formdata)

    def first_error(self) -> str | None:
        """Return the first field error in declaration order."""
        for field in self:
            if field.errors:
                return field.errors[0]
        return None

    def validate_or_raise(self) -> None:
        """Validate the form, raising ValidationError with the first message."""
        if not self.validate():
            raise ValidationError(self.first_error() or "Geçersiz form verisi")
