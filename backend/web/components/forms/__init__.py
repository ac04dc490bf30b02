"""
Form components for EduManage.

Provides the field building blocks and the sign-in / sign-up form.
"""

from .auth_form import ROLE_OPTIONS, AuthForm
from .fields import FormField, SelectField, TextInputField

__all__ = ["AuthForm", "FormField", "ROLE_OPTIONS", "SelectField", "TextInputField"]
