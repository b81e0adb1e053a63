"""
User Validator
==============

Field-level checks applied before a user is written.
"""
from typing import Dict, List

from email_validator import EmailNotValidError, validate_email

from user_api.domain.constants.user_fields import UserFields


def validate_user(name: str, email: str) -> Dict[str, List[str]]:
    """
    Validate user fields.
    
    Every failing field is reported, not just the first one.
    
    Args:
        name: User name; must contain a non-whitespace character
        email: Email address; must be syntactically valid
        
    Returns:
        Mapping of field name to error messages; empty when input is valid
    """
    errors: Dict[str, List[str]] = {}
    
    if not name or not name.strip():
        errors.setdefault(UserFields.NAME, []).append("Name is required")
    
    if not email or not email.strip():
        errors.setdefault(UserFields.EMAIL, []).append("Email is required")
    else:
        try:
            # Syntax only: no DNS lookups, and special-use or dotless domains
            # (mail.test, localhost) are accepted
            validate_email(email, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError as e:
            errors.setdefault(UserFields.EMAIL, []).append(f"Invalid email address: {e}")
    
    return errors
