import re

from django.core.exceptions import ValidationError


class ComplexityValidator:
    """
    Require mixed case letters, at least one digit and at least one symbol.
    """

    def validate(self, password, user=None):
        errors = []
        if not (re.search(r"[a-z]", password) and re.search(r"[A-Z]", password)):
            errors.append(ValidationError(
                "The password must contain at least one uppercase and one lowercase letter.",
                code="password_no_mixed_case",
            ))
        if not re.search(r"\d", password):
            errors.append(ValidationError(
                "The password must contain at least one number.",
                code="password_no_number",
            ))
        if not re.search(r"[^A-Za-z0-9]", password):
            errors.append(ValidationError(
                "The password must contain at least one symbol.",
                code="password_no_symbol",
            ))
        if errors:
            raise ValidationError(errors)

    def get_help_text(self):
        return "Your password must mix upper and lower case letters, numbers and symbols."
