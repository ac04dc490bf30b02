"""
Labelled inputs for the sign-in and sign-up forms.

`FormField` owns the label and the wrapper markup; subclasses only produce
the control itself. A field marked `invalid` gets `aria-invalid` and the
error modifier class so the form's alert and the offending input agree.
"""

from typing import Optional, Sequence, Tuple

from ..base import Component


class FormField(Component):
    def __init__(self, name: str, label: str, *, required: bool = False, invalid: bool = False) -> None:
        self.name = name
        self.label = label
        self.required = required
        self.invalid = invalid

    def control(self, **kwargs) -> str:
        raise NotImplementedError("Subclasses must implement control()")

    def render(self, **kwargs) -> str:
        marker = '<span class="form-required" aria-hidden="true">*</span>' if self.required else ""
        wrapper = self.classes("form-field", **{"form-field--error": self.invalid})
        label_attrs = self.attributes(for_=self.name, class_="form-label")
        return (
            f'<div class="{wrapper}">'
            f"<label {label_attrs}>{self.escape(self.label)}{marker}</label>"
            f"{self.control(**kwargs)}"
            "</div>"
        )

    def _common(self) -> dict:
        return {
            "id": self.name,
            "name": self.name,
            "required": self.required,
            "aria_invalid": "true" if self.invalid else None,
        }


class TextInputField(FormField):
    """Text, email or password input. Password values are never rendered."""

    def control(
        self,
        *,
        value: str = "",
        input_type: str = "text",
        autocomplete: Optional[str] = None,
        placeholder: Optional[str] = None,
    ) -> str:
        attrs = self.attributes(
            type=input_type,
            value=None if input_type == "password" or not value else value,
            autocomplete=autocomplete,
            placeholder=placeholder,
            **self._common(),
        )
        return f"<input {attrs}>"


class SelectField(FormField):
    def control(self, *, options: Sequence[Tuple[str, str]], selected: str = "") -> str:
        opts = "".join(
            f'<option {self.attributes(value=value, selected=(value == selected))}>{self.escape(label)}</option>'
            for value, label in options
        )
        return f"<select {self.attributes(**self._common())}>{opts}</select>"


__all__ = ["FormField", "SelectField", "TextInputField"]
