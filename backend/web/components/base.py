"""
Base Component class for EduManage UI components.

Components are plain Python objects that render HTML strings. Keeping markup
in Python (instead of a template engine) gives type-checked inputs, trivial
unit tests and automatic escaping at one place.
"""

from typing import Any, Optional
import html


class Component:
    """Base class for all UI components.

    Subclasses implement `render()`. Every piece of user or backend supplied
    text must pass through `escape()` before it lands in markup.
    """

    def render(self) -> str:
        """Render the component as an HTML string."""
        raise NotImplementedError("Subclasses must implement render()")

    @staticmethod
    def escape(text: Optional[Any]) -> str:
        """Escape HTML entities; None renders as an empty string."""
        return html.escape(str(text)) if text is not None else ""

    @staticmethod
    def classes(*args: str, **conditionals: bool) -> str:
        """Build a CSS class string with conditional classes.

        Example:
            >>> Component.classes("tab-link", active=True, disabled=False)
            'tab-link active'
        """
        classes = list(args)
        classes.extend(key for key, value in conditionals.items() if value)
        return " ".join(classes)

    @classmethod
    def modifier(cls, block: str, value: Optional[str]) -> str:
        """Return `block block--value` (escaped); just `block` without a value.

        Example:
            >>> Component.modifier("announcement", "urgent")
            'announcement announcement--urgent'
        """
        if not value:
            return block
        return f"{block} {block}--{cls.escape(value)}"

    @staticmethod
    def attributes(**attrs: Any) -> str:
        """Build HTML attributes from keyword arguments.

        Trailing underscores address reserved names (class_ -> class, for_ -> for);
        inner underscores become hyphens (hx_get -> hx-get). True renders a
        boolean attribute, False/None drop the attribute.

        Example:
            >>> Component.attributes(id="email", aria_invalid="false", required=True)
            'id="email" aria-invalid="false" required'
        """
        result = []
        for key, value in attrs.items():
            if key.endswith("_"):
                key = key[:-1]
            else:
                key = key.replace("_", "-")

            if value is True:
                result.append(key)
            elif value is not False and value is not None:
                result.append(f'{key}="{html.escape(str(value))}"')

        return " ".join(result)
