"""
Email template loader and renderer.
Handles Jinja2 templates for booking notification emails.
"""

import logging
from typing import Dict, Any, Optional
from pathlib import Path
from jinja2 import Environment, FileSystemLoader
from datetime import datetime

from app.domain.services.booking_formatting import (
    NOT_SPECIFIED,
    format_amount,
    format_booking_date,
    format_booking_time,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def or_not_specified(value):
    """Show a placeholder for missing values."""
    if value is None or value == "":
        return NOT_SPECIFIED
    return value


class EmailTemplateLoader:
    """Loads and renders email templates using Jinja2."""

    def __init__(
        self,
        business_name: str = "Luna Massage",
        support_email: str = "info@lunamassage.com",
        templates_dir: Optional[Path] = None
    ):
        """Initialize template loader with email templates directory."""
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.business_name = business_name
        self.support_email = support_email

        # Autoescape keeps client-supplied text (name, special requests) inert
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True
        )

        self._register_filters()

    def _register_filters(self):
        """Register custom Jinja2 filters for email templates."""
        self.env.filters["booking_date"] = format_booking_date
        self.env.filters["booking_time"] = format_booking_time
        self.env.filters["amount"] = format_amount
        self.env.filters["or_not_specified"] = or_not_specified

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render email template with context.

        Args:
            template_name: Name of template file (e.g., 'booking_confirmed.html')
            context: Template context variables

        Returns:
            Rendered template content
        """
        enhanced_context = {
            **context,
            "current_year": datetime.now().year,
            "business_name": self.business_name,
            "support_email": self.support_email,
        }

        template = self.env.get_template(template_name)
        rendered = template.render(**enhanced_context)

        logger.debug(f"Successfully rendered template: {template_name}")
        return rendered

    def template_exists(self, template_name: str) -> bool:
        """Check if template file exists."""
        return (self.templates_dir / template_name).exists()

    def list_templates(self) -> list[str]:
        """List all available email templates."""
        return sorted(path.name for path in self.templates_dir.glob("*.html"))
