# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Exception hierarchy for the donor eligibility core.

Only configuration problems are raised as exceptions. Input validation that
concerns owner-supplied data is reported through ValidationResult objects
returned by the domain functions.
"""

from typing import List, Optional


class DonorCoreException(Exception):
    """Base class for custom application exceptions."""
    
    def __init__(self, message: str, error_type: str = "application-error"):
        super().__init__(message)
        self.message = message
        self.error_type = error_type


class InvalidConfiguration(DonorCoreException):
    """Raised when the donation policy cannot support an evaluation."""
    
    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(message, "invalid-configuration")
        self.setting = setting


class ValidationException(DonorCoreException):
    """Exception for validation errors."""
    
    def __init__(self, message: str, validation_errors: List[str] = None):
        super().__init__(message, "validation-error")
        self.validation_errors = validation_errors or []
