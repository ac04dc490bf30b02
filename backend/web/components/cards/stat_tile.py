"""Stat tile shown in the dashboard header grid."""

from typing import Optional

from ..base import Component


class StatTile(Component):
    def __init__(self, label: str, value: str, *, icon: str = "", trend: Optional[str] = None, tone: str = "blue"):
        self.label = label
        self.value = value
        self.icon = icon
        self.trend = trend
        self.tone = tone

    def render(self) -> str:
        trend_html = f'<p class="stat-tile__trend">{self.escape(self.trend)}</p>' if self.trend else ""
        return (
            f'<div class="{self.modifier("stat-tile", self.tone)}">'
            '<div class="stat-tile__body">'
            f'<p class="stat-tile__label">{self.escape(self.label)}</p>'
            f'<p class="stat-tile__value">{self.escape(self.value)}</p>'
            f"{trend_html}"
            "</div>"
            f'<div class="stat-tile__icon" aria-hidden="true">{self.icon}</div>'
            "</div>"
        )
