"""Forms for the two-sided unit converters and the pixel/em converter.

Value fields are free text: a value that does not parse simply leaves its
partner untouched, so they carry no numeric validators. Unit selects are
checked against the quantity's own table.
"""

from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import SelectField, StringField
from wtforms.validators import AnyOf, InputRequired, Length

from ...services.unit_conversion import ConversionEngine, ConverterState, PixelEmState
from ...services.unit_conversion.pixel_em import PIXEL_EM_FIELDS
from ...services.unit_conversion.unit_conversion import PAIR_FIELDS
from ...utils.form_fields import FiniteFloatField


class ConverterForm(FlaskForm):
    from_value = StringField("From", validators=[Length(max=64)])
    to_value = StringField("To", validators=[Length(max=64)])
    from_unit = SelectField("From unit", choices=[])
    to_unit = SelectField("To unit", choices=[])
    changed = StringField(default="from_value", validators=[AnyOf(PAIR_FIELDS)])

    @classmethod
    def for_quantity(cls, quantity: str, **kwargs) -> "ConverterForm":
        form = cls(**kwargs)
        choices = ConversionEngine.unit_choices(quantity)
        form.from_unit.choices = choices
        form.to_unit.choices = choices
        return form

    def to_state(self) -> ConverterState:
        return ConverterState(
            from_value=self.from_value.data or "",
            to_value=self.to_value.data or "",
            from_unit=self.from_unit.data,
            to_unit=self.to_unit.data,
        )

    def apply_state(self, state: ConverterState) -> None:
        self.from_value.data = state.from_value
        self.to_value.data = state.to_value


class PixelEmForm(FlaskForm):
    pixels = StringField("Pixels (px)", default="16", validators=[Length(max=64)])
    ems = StringField("EMs", default="1", validators=[Length(max=64)])
    base_size = StringField("Base Font Size (px)", default="16", validators=[Length(max=64)])
    changed = StringField(default="pixels", validators=[AnyOf(PIXEL_EM_FIELDS)])

    def to_state(self) -> PixelEmState:
        return PixelEmState(
            pixels=self.pixels.data or "",
            ems=self.ems.data or "",
            base_size=self.base_size.data or "",
        )

    def apply_state(self, state: PixelEmState) -> None:
        self.pixels.data = state.pixels
        self.ems.data = state.ems
        self.base_size.data = state.base_size


class ConversionRequestForm(FlaskForm):
    """One-shot conversion: a numeric value between two units of one quantity."""

    value = FiniteFloatField("Value", validators=[InputRequired(message="Please enter a number.")])
    from_unit = SelectField("From unit", choices=[])
    to_unit = SelectField("To unit", choices=[])

    @classmethod
    def for_quantity(cls, quantity: str, **kwargs) -> "ConversionRequestForm":
        form = cls(**kwargs)
        choices = ConversionEngine.unit_choices(quantity)
        form.from_unit.choices = choices
        form.to_unit.choices = choices
        return form
