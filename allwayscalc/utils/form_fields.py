"""Shared WTForms field types."""

from __future__ import annotations

import math

from wtforms import FloatField


class FiniteFloatField(FloatField):
    """FloatField that rejects ``inf`` and ``nan``, which ``float()`` happily accepts."""

    def process_formdata(self, valuelist):
        super().process_formdata(valuelist)
        if self.data is not None and not math.isfinite(self.data):
            self.data = None
            raise ValueError(self.gettext("Not a valid float value."))
