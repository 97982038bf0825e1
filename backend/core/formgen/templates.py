# formgen/templates.py
"""
Sample CSV templates for common form types, and CSV export.
"""

import csv
import io
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .detector.models import FieldType


@dataclass(frozen=True)
class CsvTemplate:
    key: str
    name: str
    description: str
    headers: Tuple[str, ...]
    sample_data: Tuple[Tuple[str, ...], ...]
    field_types: Tuple[FieldType, ...]
    instructions: str

    @property
    def filename(self) -> str:
        stem = re.sub(r"\s+", "_", self.name)
        return f"{stem}_template.csv"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "headers": list(self.headers),
            "sample_data": [list(row) for row in self.sample_data],
            "field_types": [field_type.value for field_type in self.field_types],
            "instructions": self.instructions
        }


def _template(key, name, description, headers, sample_data, field_types, instructions) -> CsvTemplate:
    return CsvTemplate(
        key=key,
        name=name,
        description=description,
        headers=tuple(headers),
        sample_data=tuple(tuple(row) for row in sample_data),
        field_types=tuple(FieldType(value) for value in field_types),
        instructions=instructions
    )


CSV_TEMPLATES: Dict[str, CsvTemplate] = {
    "contact": _template(
        "contact",
        "Contact Information Form",
        "Basic contact information collection form",
        ["name", "email", "phone", "company", "position", "address", "city", "state", "zipcode", "country"],
        [
            ["John Doe", "john@example.com", "(555) 123-4567", "Acme Corp", "Manager",
             "123 Main St", "New York", "NY", "10001", "United States"],
            ["Jane Smith", "jane@example.com", "(555) 987-6543", "Tech Inc", "Developer",
             "456 Oak Ave", "San Francisco", "CA", "94102", "United States"],
            ["Bob Johnson", "bob@example.com", "(555) 456-7890", "Design Co", "Designer",
             "789 Pine Rd", "Austin", "TX", "73301", "United States"],
        ],
        ["text", "email", "phone", "text", "text", "address", "text", "state", "zipcode", "country"],
        "This template includes common contact fields. Replace the sample data with your "
        "actual data, keeping the header row intact."
    ),
    "registration": _template(
        "registration",
        "Event Registration Form",
        "Event registration with attendee information",
        ["first_name", "last_name", "email", "phone", "company", "dietary_restrictions",
         "emergency_contact", "emergency_phone", "registration_date", "payment_status"],
        [
            ["John", "Doe", "john@example.com", "(555) 123-4567", "Acme Corp", "Vegetarian",
             "Jane Doe", "(555) 123-4568", "2024-01-15", "Paid"],
            ["Jane", "Smith", "jane@example.com", "(555) 987-6543", "Tech Inc", "None",
             "John Smith", "(555) 987-6544", "2024-01-16", "Pending"],
            ["Bob", "Johnson", "bob@example.com", "(555) 456-7890", "Design Co", "Gluten-Free",
             "Mary Johnson", "(555) 456-7891", "2024-01-17", "Paid"],
        ],
        ["text", "text", "email", "phone", "text", "textarea", "text", "phone", "date", "select"],
        "Perfect for event registrations. Include dietary restrictions, emergency contacts "
        "and payment status tracking."
    ),
    "survey": _template(
        "survey",
        "Customer Satisfaction Survey",
        "Customer feedback and satisfaction survey",
        ["customer_id", "product_name", "purchase_date", "overall_rating", "price_rating",
         "quality_rating", "service_rating", "recommendation", "comments", "contact_permission"],
        [
            ["CUST001", "Premium Widget", "2024-01-10", "5", "4", "5", "5", "Yes",
             "Excellent product, highly recommend!", "Yes"],
            ["CUST002", "Basic Widget", "2024-01-12", "3", "3", "3", "4", "Maybe",
             "Good product but could be better", "No"],
            ["CUST003", "Deluxe Widget", "2024-01-14", "4", "4", "4", "3", "Yes",
             "Great quality, fast shipping", "Yes"],
        ],
        ["text", "text", "date", "rating", "rating", "rating", "rating", "yesno", "textarea", "yesno"],
        "Ideal for customer feedback collection. Includes rating scales and permission "
        "tracking for follow-up contact."
    ),
    "application": _template(
        "application",
        "Job Application Form",
        "Comprehensive job application form",
        ["first_name", "last_name", "email", "phone", "address", "city", "state", "zipcode",
         "position", "experience_years", "education_level", "skills", "availability",
         "salary_expectation", "references"],
        [
            ["John", "Doe", "john@example.com", "(555) 123-4567", "123 Main St", "New York", "NY",
             "10001", "Software Engineer", "5", "Bachelor", "JavaScript, React, Node.js",
             "Immediate", "80000", "Jane Smith - jane@example.com"],
            ["Jane", "Smith", "jane@example.com", "(555) 987-6543", "456 Oak Ave", "San Francisco",
             "CA", "94102", "UX Designer", "3", "Master", "Figma, Sketch, Adobe Creative Suite",
             "2 weeks", "75000", "Bob Johnson - bob@example.com"],
            ["Bob", "Johnson", "bob@example.com", "(555) 456-7890", "789 Pine Rd", "Austin", "TX",
             "73301", "Product Manager", "7", "MBA", "Agile, Scrum, Product Strategy",
             "1 month", "95000", "Alice Brown - alice@example.com"],
        ],
        ["text", "text", "email", "phone", "address", "text", "state", "zipcode", "text",
         "number", "select", "tags", "text", "money", "textarea"],
        "Complete job application template. Includes personal info, experience, education "
        "and references."
    ),
    "feedback": _template(
        "feedback",
        "Product Feedback Form",
        "Product feedback and feature requests",
        ["user_id", "product_version", "feedback_type", "priority", "category", "title",
         "description", "steps_to_reproduce", "expected_behavior", "actual_behavior",
         "browser", "os", "submitted_date"],
        [
            ["USER001", "2.1.0", "Bug Report", "High", "UI", "Login button not working",
             "The login button does not respond when clicked",
             "1. Go to login page\n2. Enter credentials\n3. Click login button",
             "User should be logged in", "Nothing happens when button is clicked",
             "Chrome 120", "Windows 11", "2024-01-15"],
            ["USER002", "2.1.0", "Feature Request", "Medium", "Functionality", "Dark mode support",
             "Would like to see a dark mode option", "N/A", "Dark mode toggle in settings", "N/A",
             "Firefox 121", "macOS 14", "2024-01-16"],
            ["USER003", "2.0.9", "Enhancement", "Low", "Performance", "Slow page loading",
             "The dashboard takes too long to load",
             "1. Login to account\n2. Navigate to dashboard",
             "Dashboard should load within 2 seconds", "Dashboard takes 10+ seconds to load",
             "Safari 17", "macOS 14", "2024-01-17"],
        ],
        ["text", "text", "select", "select", "select", "text", "textarea", "textarea",
         "textarea", "textarea", "text", "text", "date"],
        "Comprehensive feedback collection template. Perfect for bug reports, feature "
        "requests and user feedback."
    ),
}


def generate_csv_content(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """
    Writes headers and rows as CSV text.

    Fields holding the delimiter, quotes or newlines are quoted and inner
    quotes doubled; lines end with a bare newline.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return buffer.getvalue()


def template_csv(template: CsvTemplate) -> str:
    return generate_csv_content(template.headers, template.sample_data)


def get_template(key: str) -> Optional[CsvTemplate]:
    return CSV_TEMPLATES.get(key)


def get_template_categories() -> List[str]:
    return list(CSV_TEMPLATES.keys())


def get_templates_by_category(category: str) -> List[CsvTemplate]:
    """Templates whose name or description mentions the category (case-insensitive)."""
    needle = category.lower()
    return [
        template for template in CSV_TEMPLATES.values()
        if needle in template.name.lower() or needle in template.description.lower()
    ]
